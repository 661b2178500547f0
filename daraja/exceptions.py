"""
Custom exceptions for Daraja API operations.

Operation failures are returned as lists of these instances rather than
raised; only configuration and caller input errors are raised.
"""


class DarajaException(Exception):
    """Base exception for all Daraja-related errors."""

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class TransportError(DarajaException):
    """Raised when a request never completes (DNS, refused connection, timeout)."""
    pass


class APIError(DarajaException):
    """Raised when the Daraja API returns a non-success HTTP status."""
    pass


class AuthenticationError(DarajaException):
    """Raised when the token endpoint rejects the configured credentials."""
    pass


class DeserializationError(DarajaException):
    """Raised when a response body cannot be decoded into its payload type."""
    pass


class SerializationError(DarajaException):
    """Raised when a request payload cannot be encoded as JSON."""
    pass


class ConfigurationError(DarajaException):
    """Raised when there's a configuration issue."""
    pass


class ValidationError(DarajaException):
    """Raised when input validation fails."""
    pass


class InvalidPhoneNumberError(ValidationError):
    """Raised when phone number format is invalid."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when amount is invalid."""
    pass
