from typing import NamedTuple

from myshell.config import BACKGROUND_MARKER


class Command(NamedTuple):
    args: list
    background: bool


def parse_command(line):
    """
    Split a command line into arguments and a background flag.
    Returns: Command(args, background)

    Only the space character separates tokens; quotes and backslashes are
    literal. A token equal to the background marker ends the command: it and
    everything after it are dropped.
    """
    args = []
    background = False

    for tok in line.split(" "):
        if not tok:
            continue
        if tok == BACKGROUND_MARKER:
            background = True
            break
        args.append(tok)

    return Command(args, background)
