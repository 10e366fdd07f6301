import os
import sys

from loguru import logger

from myshell.config import BUILTIN_CD, BUILTIN_EXIT, HOME_VAR


def builtin_exit(state):
    """Stop the read loop"""
    state.running = False
    return 0


def builtin_cd(args):
    """Change directory (no argument: $HOME)"""
    if args:
        path = args[0]
    else:
        path = os.getenv(HOME_VAR)
        if path is None:
            print(f"cd: {HOME_VAR} not set", file=sys.stderr)
            return 1

    try:
        os.chdir(path)
    except (OSError, ValueError) as e:
        print(f"cd: {path}: {getattr(e, 'strerror', None) or e}", file=sys.stderr)
        return 1

    logger.debug("cwd is now {}", os.getcwd())
    return 0


def execute_builtin(args, state):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)

    A failed builtin still reports executed=True so it is never handed to the
    executor.
    """
    if not args:
        return False, 0

    cmd = args[0]

    if cmd in BUILTIN_EXIT:
        return True, builtin_exit(state)
    elif cmd in BUILTIN_CD:
        return True, builtin_cd(args[1:])

    return False, 0
