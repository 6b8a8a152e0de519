"""
Tests for the error taxonomy and exception mapping.
"""

from core.errors import (
    BaseAppError,
    ErrorCode,
    ErrorSeverity,
    ErrorType,
    SystemError,
    ValidationError,
    map_exception,
)


class TestValidationError:
    """Test the ValidationError class."""

    def test_field_stored_in_context(self):
        error = ValidationError(ErrorCode.REQUIRED_FIELD_MISSING, "Please enter a name", field="fname")

        assert error.field == "fname"
        assert error.context == {"field": "fname"}
        assert error.type == ErrorType.VALIDATION
        assert error.severity == ErrorSeverity.LOW

    def test_str_is_user_message(self):
        error = ValidationError(ErrorCode.INVALID_FORMAT, "Invalid email address")
        assert str(error) == "Invalid email address"

    def test_repr(self):
        error = ValidationError(ErrorCode.INVALID_FORMAT, "Invalid email address")
        assert repr(error) == "ValidationError(type=validation, code=INVALID_FORMAT, message='Invalid email address')"

    def test_is_raisable(self):
        error = ValidationError(ErrorCode.INVALID_INPUT, "bad")
        try:
            raise error
        except BaseAppError as caught:
            assert caught is error


class TestMapException:
    """Test mapping built-in exceptions to application errors."""

    def test_app_error_returned_unchanged(self):
        error = SystemError(ErrorCode.OS_ERROR, "Disk full")
        assert map_exception(error) is error

    def test_value_error_is_unexpected(self):
        """A ValueError reaching the hooks is a bug, not a form validation failure."""
        error = map_exception(ValueError("Bad value"))

        assert isinstance(error, SystemError)
        assert error.code == ErrorCode.UNKNOWN
        assert error.severity == ErrorSeverity.HIGH
        assert error.user_message == "An unexpected error occurred"
        assert error.technical_message == "ValueError: Bad value"

    def test_os_error(self):
        error = map_exception(OSError())

        assert isinstance(error, SystemError)
        assert error.code == ErrorCode.OS_ERROR
        assert error.user_message == "System error occurred"

    def test_unknown_exception(self):
        error = map_exception(KeyError("x"), {"source": "test"})

        assert isinstance(error, SystemError)
        assert error.code == ErrorCode.UNKNOWN
        assert error.context == {"source": "test"}

    def test_os_error_keeps_message(self):
        error = map_exception(FileNotFoundError("app.log missing"))

        assert error.code == ErrorCode.OS_ERROR
        assert error.user_message == "app.log missing"
