import sys

from clipboard_mcp.mcp.mcp_server import main

sys.exit(main())
