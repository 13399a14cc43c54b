import sys

from nix_cst.cli import main

if __name__ == "__main__":
    sys.exit(main())
