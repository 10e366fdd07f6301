import sys

from myshell.log import configure_logging
from myshell.shell import main_loop


def main():
    configure_logging()
    sys.exit(main_loop())


if __name__ == "__main__":
    main()
