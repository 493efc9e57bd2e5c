import sys

from agent_web.cli.controller import main

if __name__ == "__main__":
    sys.exit(main())
