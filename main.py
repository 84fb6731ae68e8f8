import sys

from tictactoe.app import run

if __name__ == '__main__':
    sys.exit(run())
