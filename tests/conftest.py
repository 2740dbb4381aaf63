import io
from typing import Callable, Iterable, Tuple

import pytest

from keyprompt import KeyPrompt
from keyprompt.input.display import TerminalDisplay
from keyprompt.input.keysources import ScriptedKeySource


@pytest.fixture
def display_streams() -> Tuple[io.StringIO, io.StringIO]:
    return io.StringIO(), io.StringIO()


@pytest.fixture
def display(display_streams) -> TerminalDisplay:
    output, error = display_streams
    return TerminalDisplay(output=output, error=error)


@pytest.fixture
def make_session(display) -> Callable[[Iterable], KeyPrompt]:
    """Build a session that replays the given keystrokes."""

    def _make_session(script: Iterable) -> KeyPrompt:
        return KeyPrompt(key_source=ScriptedKeySource(script), display=display)

    return _make_session
