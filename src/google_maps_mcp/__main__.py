import sys

from google_maps_mcp.server import main

sys.exit(main())
