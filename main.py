import sys

from xcode_bump.cli import main

if __name__ == "__main__":
    sys.exit(main())
