"""Unit tests for custom exception classes."""

import pytest

from hardhat_environments.exceptions import (
    ConfigurationError,
    DefectiveRecordError,
    UnknownForkNetworkError,
    UnknownNetworkError,
    UnknownProjectError,
)


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_unknown_network_as_key_error(self):
        """Test that UnknownNetworkError can be caught as KeyError."""
        with pytest.raises(KeyError):
            raise UnknownNetworkError("test")

    def test_catch_unknown_project_as_key_error(self):
        """Test that UnknownProjectError can be caught as KeyError."""
        with pytest.raises(KeyError):
            raise UnknownProjectError("test")

    def test_catch_unknown_fork_network_as_value_error(self):
        """Test that UnknownForkNetworkError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise UnknownForkNetworkError("test")

    def test_catch_defective_record_as_value_error(self):
        """Test that DefectiveRecordError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise DefectiveRecordError("test")

    def test_catch_all_as_configuration_error(self):
        """Test that all custom exceptions can be caught as ConfigurationError."""
        exceptions = [
            UnknownNetworkError("test"),
            UnknownProjectError("test"),
            UnknownForkNetworkError("test"),
            DefectiveRecordError("test"),
        ]

        for exc in exceptions:
            with pytest.raises(ConfigurationError):
                raise exc


class TestExceptionCreation:
    """Test creating exceptions with various message types."""

    def test_exceptions_accept_string_messages(self):
        """Test that all exceptions render their message unquoted."""
        exceptions = [
            ConfigurationError,
            UnknownNetworkError,
            UnknownProjectError,
            UnknownForkNetworkError,
            DefectiveRecordError,
        ]

        for exc_class in exceptions:
            exc = exc_class("test message")
            assert str(exc) == "test message"

    def test_exceptions_accept_no_arguments(self):
        """Test that exceptions can be created without a message."""
        for exc_class in [UnknownNetworkError, UnknownProjectError]:
            exc = exc_class()
            assert str(exc) == ""
