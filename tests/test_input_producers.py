"""
Tests for the line editor and instant capture input producers.
"""

import pytest

from keyprompt.input import InstantCapture, LineEditor
from keyprompt.input.exceptions import KeyReadException, UserExit
from keyprompt.input.keysources import ScriptedKeySource


class TestLineEditor:
    """Test LineEditor capture in the basic and masked styles."""

    def test_basic_echoes_characters(self, display, display_streams):
        output, _ = display_streams
        editor = LineEditor(ScriptedKeySource(["hello\n"]), display)

        assert editor.capture() == "hello"
        assert output.getvalue() == "hello"

    def test_masked_backspace(self, display, display_streams):
        output, _ = display_streams
        editor = LineEditor(
            ScriptedKeySource(["a", "b", "\x7f", "c", "\n"]), display, mask="*"
        )

        assert editor.capture() == "ac"
        assert output.getvalue() == "**\b \b*"

    def test_masked_never_reveals_input(self, display, display_streams):
        output, _ = display_streams
        editor = LineEditor(ScriptedKeySource(["s3cret\n"]), display, mask="#")

        assert editor.capture() == "s3cret"
        assert output.getvalue() == "######"

    def test_backspace_on_empty_line_is_noop(self, display, display_streams):
        output, _ = display_streams
        editor = LineEditor(ScriptedKeySource(["\x7f", "\b", "\x7f", "x\n"]), display)

        assert editor.capture() == "x"
        assert output.getvalue() == "x"

    def test_backspace_everything(self, display):
        editor = LineEditor(ScriptedKeySource(["ab\x7f\x7f\x7f\n"]), display)

        assert editor.capture() == ""

    @pytest.mark.parametrize("newline", ["\n", "\r"])
    def test_immediate_newline_returns_empty(self, display, newline):
        assert LineEditor(ScriptedKeySource([newline]), display).capture() == ""

    def test_stops_at_first_newline(self, display):
        key_source = ScriptedKeySource(["one\ntwo\n"])
        editor = LineEditor(key_source, display)

        assert editor.capture() == "one"
        assert editor() == "two"
        assert key_source.exhausted

    def test_transient_read_failure_continues(self, display):
        key_source = ScriptedKeySource(["a", KeyReadException("boom"), "b\n"])

        assert LineEditor(key_source, display).capture() == "ab"
        assert key_source.resets == 1

    def test_closed_input_raises_user_exit(self, display):
        with pytest.raises(UserExit):
            LineEditor(ScriptedKeySource(["abc"]), display).capture()

    def test_interrupt_raises_keyboard_interrupt(self, display):
        with pytest.raises(KeyboardInterrupt):
            LineEditor(ScriptedKeySource(["ab\x03"]), display).capture()

    def test_end_of_input_on_empty_line_raises_user_exit(self, display):
        with pytest.raises(UserExit):
            LineEditor(ScriptedKeySource(["\x04"]), display).capture()

    def test_end_of_input_after_backspacing_raises_user_exit(self, display):
        with pytest.raises(UserExit):
            LineEditor(ScriptedKeySource(["a\x7f\x04"]), display).capture()

    def test_end_of_input_ignored_on_non_empty_line(self, display, display_streams):
        output, _ = display_streams

        assert LineEditor(ScriptedKeySource(["ab\x04c\n"]), display).capture() == "abc"
        assert output.getvalue() == "abc"


class TestInstantCapture:
    """Test InstantCapture."""

    def test_returns_single_key_and_echoes_upper(self, display, display_streams):
        output, _ = display_streams
        key_source = ScriptedKeySource(["yes"])

        assert InstantCapture(key_source, display).capture() == "y"
        assert output.getvalue() == "Y"
        assert not key_source.exhausted

    def test_does_not_wait_for_newline(self, display):
        assert InstantCapture(ScriptedKeySource(["\n"]), display).capture() == "\n"

    def test_interrupt(self, display):
        with pytest.raises(KeyboardInterrupt):
            InstantCapture(ScriptedKeySource(["\x03"]), display).capture()

    def test_end_of_input_raises_user_exit(self, display, display_streams):
        output, _ = display_streams

        with pytest.raises(UserExit):
            InstantCapture(ScriptedKeySource(["\x04"]), display).capture()

        assert output.getvalue() == ""
