import pytest
from loguru import logger
from revertible.commands import Command
from revertible.config import set_config


@pytest.fixture
def journal():
    """Shared list that records sink and instruction calls in order."""
    return []


@pytest.fixture
def make_command(journal):
    """Build commands whose sinks and instructions write to the journal."""
    def factory(name: str, **kwargs) -> Command:
        cmd = Command(name=name, **kwargs)
        cmd.on_apply.connect(lambda data: journal.append((name, "apply", data)))
        cmd.on_revert.connect(lambda data: journal.append((name, "revert", data)))
        return cmd
    return factory


@pytest.fixture
def log_messages():
    """Capture loguru output at DEBUG and above."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_active_config():
    """Commands read settings from the active config; keep tests isolated."""
    yield
    set_config(None)
