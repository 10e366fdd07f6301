import sys

from loguru import logger

from myshell.builtin import execute_builtin
from myshell.config import PROMPT
from myshell.executor import execute
from myshell.job_control import JobTable
from myshell.parser import parse_command

try:
    import readline  # noqa: F401  line editing for input()
except ImportError:
    readline = None


class ShellState:
    """State owned by the read loop"""

    def __init__(self):
        self.running = True
        self.last_status = 0
        self.jobs = JobTable()


def init_readline():
    """Emacs-style editing at the prompt; history is never saved"""
    if readline is None or not sys.stdin.isatty():
        return
    readline.parse_and_bind("set editing-mode emacs")
    readline.parse_and_bind("\\e[1;5D: backward-word")
    readline.parse_and_bind("\\e[1;5C: forward-word")


def pass_raw_bytes(*streams):
    """Undecodable input bytes survive as surrogates and reach os/subprocess unchanged"""
    for stream in streams:
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def read_line(stream=None, prompt=PROMPT):
    """
    Show the prompt and read one line.
    Returns: the line without its trailing newline, or None at end of input
    """
    if stream is None:
        try:
            return input(prompt)
        except EOFError:
            print()
            return None

    print(prompt, end="", flush=True)
    line = stream.readline()
    if not line:
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line


def main_loop(stdin=None):
    """
    Main shell loop.
    Returns: process exit status (1 when input could not be read)
    """
    state = ShellState()

    if stdin is None and not sys.stdin.isatty():
        stdin = sys.stdin
    if stdin is None:
        init_readline()
    pass_raw_bytes(stdin if stdin is not None else sys.stdin, sys.stdout)

    try:
        while state.running:
            state.jobs.reap()

            try:
                line = read_line(stdin)
            except KeyboardInterrupt:
                print()
                continue
            except (OSError, UnicodeDecodeError) as e:
                print(f"myshell: getline: {e}", file=sys.stderr)
                return 1

            if line is None:
                print("myshell: getline: end of input", file=sys.stderr)
                return 1

            if not line:
                continue

            args, background = parse_command(line)
            if not args:
                logger.debug("nothing to run in {!r}", line)
                continue

            executed, exit_code = execute_builtin(args, state)
            if executed:
                state.last_status = exit_code
                continue

            execute(args, background, state)

        return 0
    finally:
        state.jobs.cleanup()
