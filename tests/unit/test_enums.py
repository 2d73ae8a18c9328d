"""Unit tests for StrEnum definitions."""

from lev.enums import CommandType, ErrorKind, OutputFormat


class TestCommandType:
    """Tests for CommandType enum."""

    def test_values(self):
        assert CommandType.GET == "get"
        assert CommandType.SET == "set"
        assert CommandType.UNSET == "unset"

    def test_all_members(self):
        """CommandType should have exactly 3 members."""
        assert len(CommandType) == 3

    def test_lookup_by_value(self):
        assert CommandType("unset") is CommandType.UNSET


class TestErrorKind:
    """Tests for ErrorKind enum."""

    def test_all_members(self):
        assert set(ErrorKind) == {
            ErrorKind.INVALID_ARGUMENTS,
            ErrorKind.NOT_FOUND,
            ErrorKind.UNAUTHORIZED,
            ErrorKind.VALIDATION_FAILED,
            ErrorKind.TRANSIENT,
            ErrorKind.UNKNOWN,
        }

    def test_string_comparison(self):
        assert ErrorKind.NOT_FOUND == "not_found"
        assert "transient" == ErrorKind.TRANSIENT


class TestOutputFormat:
    def test_values(self):
        assert OutputFormat.ENV == "env"
        assert OutputFormat.JSON == "json"
