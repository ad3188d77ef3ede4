import sys

from tool_server.main import main

sys.exit(main())
