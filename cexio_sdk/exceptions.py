"""Exceptions raised by the CEX.io SDK."""


class CexIoError(Exception):
    """Base exception for all SDK errors."""

    pass


class MissingCredentialError(CexIoError, ValueError):
    """A required credential was not supplied when building a client."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Mandatory parameter {name} not provided")


class MissingParameterError(CexIoError, ValueError):
    """A required operation parameter is missing. Raised before any request is made."""

    def __init__(self, operation: str, name: str):
        self.operation = operation
        self.name = name
        super().__init__(f"{operation}(): Mandatory parameter {name} not provided")


class ResponseFormatError(CexIoError):
    """A successful response could not be mapped to its model."""

    def __init__(self, operation: str, payload: object):
        self.operation = operation
        self.payload = payload
        super().__init__(f"{operation}(): unexpected response {payload!r}")


class ReservedParameterError(CexIoError, ValueError):
    """A form field would overwrite one of the authentication fields."""

    def __init__(self, method: str, name: str):
        self.method = method
        self.name = name
        super().__init__(f"{method}(): parameter {name} is reserved for request signing")
