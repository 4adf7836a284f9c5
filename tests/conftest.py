import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from lzd import ColorRegistry, RecordingSink, clear_debuggers, create_debugger, get_registry, set_default_sink


@pytest.fixture(autouse=True)
def reset_global_state():
    get_registry().reset()
    clear_debuggers()
    set_default_sink(None)
    yield
    get_registry().reset()
    clear_debuggers()
    set_default_sink(None)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def registry() -> ColorRegistry:
    return ColorRegistry()


@pytest.fixture
def make_debugger(sink, registry):
    def factory(name=None, **kwargs):
        kwargs.setdefault('sink', sink)
        kwargs.setdefault('registry', registry)
        return create_debugger(name, **kwargs)
    return factory
