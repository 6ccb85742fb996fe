"""
Custom exception classes for the application.

Every exception carries the HTTP status code it maps to, so the
`handle_http_errors` decorator can turn it into a response without
knowing about individual exception types.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails validation checks before processing.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class UnknownSortFieldError(ValidationError):
    """
    An orderBy clause names a field without a property mapping.

    HTTP Status: 400 Bad Request
    """

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Key mapping for {field_name} is missing")


class UnknownFieldError(ValidationError):
    """
    A data shaping field does not exist on the resource.

    HTTP Status: 400 Bad Request
    """

    def __init__(self, field_name: str, resource: str):
        self.field_name = field_name
        self.resource = resource
        super().__init__(f"Property {field_name} wasn't found on {resource}")


class ConfigurationError(AppException):
    """
    The service is missing configuration it needs to answer a request.

    Raised when no property mapping is registered for a type pair or a
    mapping points at a column the model does not have. This is a
    deployment defect, surfaced to the caller of the failing request only.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
