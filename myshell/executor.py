import errno
import os
import subprocess
import sys

from loguru import logger

from myshell.config import EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND


def spawn(args, background=False):
    """
    Start args[0] with the full argument vector.
    Returns: (Popen or None, status)

    The child inherits the shell's stdin/stdout/stderr. Background children
    get their own process group so Ctrl+C at the prompt does not reach them.
    """
    # Anything printed so far (prompt, notices) must land before the child's output
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        if background:
            proc = subprocess.Popen(args, preexec_fn=os.setpgrp)
        else:
            proc = subprocess.Popen(args)
    except FileNotFoundError:
        print(f"myshell: command not found: {args[0]}", file=sys.stderr)
        return None, EXIT_NOT_FOUND
    except PermissionError:
        print(f"myshell: permission denied: {args[0]}", file=sys.stderr)
        return None, EXIT_NOT_EXECUTABLE
    except OSError as e:
        if e.errno in (errno.EAGAIN, errno.ENOMEM):
            print(f"myshell: fork: {e.strerror}", file=sys.stderr)
            return None, 1
        # exec itself failed (ENOEXEC, ELOOP, ...)
        print(f"myshell: {args[0]}: {e.strerror or e}", file=sys.stderr)
        return None, EXIT_NOT_EXECUTABLE
    except ValueError as e:
        print(f"myshell: {args[0]}: {e}", file=sys.stderr)
        return None, 1

    logger.debug("spawned {} as pid {} (background={})", args[0], proc.pid, background)
    return proc, 0


def wait_foreground(proc):
    """Block until this child exits. Returns its exit code."""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            # SIGINT went to the child as well; keep waiting for it
            print()


def execute(args, background, state):
    """
    Run an external command in the foreground or background.
    Returns: exit_code
    """
    proc, status = spawn(args, background)
    if proc is None:
        state.last_status = status
        return status

    if background:
        state.jobs.add(proc, " ".join(args))
        state.last_status = 0
        return 0

    status = wait_foreground(proc)
    logger.debug("pid {} exited with status {}", proc.pid, status)
    state.last_status = status
    return status
