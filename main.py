# main.py

import sys

from nxn_tictactoe.cli import main


if __name__ == "__main__":
    sys.exit(main())
