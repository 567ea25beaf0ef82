"""Tests for the binit exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy
3. String representation
4. Context carried by each subclass
"""

import pytest

from binit.exceptions import (
    BinitError,
    ExecError,
    IniSyntaxError,
    InputReadError,
    PatternError,
    SeparatorError,
)


class TestBinitError:
    """Tests for base BinitError class."""

    def test_basic_construction(self):
        error = BinitError("TEST_CODE", "Test message")

        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_none_details_becomes_empty_dict(self):
        error = BinitError("TEST_CODE", "Test message", details=None)
        assert error.details == {}

    def test_str_without_details(self):
        error = BinitError("TEST_CODE", "Test message")
        assert str(error) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        error = BinitError("TEST_CODE", "Test message", details={"foo": "bar"})

        result = str(error)
        assert "TEST_CODE" in result
        assert "Test message" in result
        assert "foo" in result

    def test_args_contains_message(self):
        error = BinitError("CODE", "The error message")
        assert "The error message" in error.args

    def test_to_dict(self):
        error = BinitError("TEST_CODE", "Test message", details={"key": "value"})

        assert error.to_dict() == {
            "code": "TEST_CODE",
            "message": "Test message",
            "details": {"key": "value"},
        }


class TestSubclasses:
    """Tests for the specific error types."""

    @pytest.mark.parametrize(
        "error",
        [
            PatternError("a*", "bad"),
            SeparatorError("\\q", "bad"),
            IniSyntaxError(3, "bad"),
            InputReadError("x.ini", "missing"),
            ExecError("nope", exit_code=127),
        ],
    )
    def test_all_inherit_from_binit_error(self, error):
        assert isinstance(error, BinitError)
        assert isinstance(error, Exception)

    def test_pattern_error_carries_pattern(self):
        error = PatternError("FOO*", "boom")

        assert error.code == "INVALID_PATTERN"
        assert error.pattern == "FOO*"
        assert error.details == {"pattern": "FOO*"}
        assert "'FOO*'" in error.message

    def test_separator_error_carries_raw_value(self):
        error = SeparatorError("\\q", "invalid escape")

        assert error.code == "INVALID_SEPARATOR"
        assert error.raw == "\\q"
        assert "unable to unquote separator" in error.message

    def test_ini_syntax_error_carries_line(self):
        error = IniSyntaxError(12, "missing key name")

        assert error.code == "INI_SYNTAX"
        assert error.line == 12
        assert error.message == "line 12: missing key name"

    def test_input_read_error_carries_path(self):
        error = InputReadError("/etc/none.ini", "No such file or directory")

        assert error.code == "INPUT_READ"
        assert error.path == "/etc/none.ini"
        assert error.message == "error reading </etc/none.ini>: No such file or directory"

    def test_exec_error_carries_exit_code(self):
        error = ExecError("exec failed", exit_code=126, details={"program": "/bin/x"})

        assert error.code == "EXEC_FAILED"
        assert error.exit_code == 126
        assert error.details["program"] == "/bin/x"

    def test_can_be_caught_as_base(self):
        with pytest.raises(BinitError) as exc_info:
            raise InputReadError("a.ini", "denied")

        assert exc_info.value.code == "INPUT_READ"
