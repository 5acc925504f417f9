import sys

from bbox2d.cli import main

if __name__ == '__main__':
    sys.exit(main())
