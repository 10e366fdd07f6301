import pytest

from myshell.log import configure_logging
from myshell.shell import ShellState


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING")


@pytest.fixture
def state():
    state = ShellState()
    yield state
    for proc, _ in state.jobs.jobs.values():
        if proc.poll() is None:
            proc.kill()
            proc.wait()
