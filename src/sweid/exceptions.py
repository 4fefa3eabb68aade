"""
Exception types for sweid.

The classifier itself never raises; these cover the code around it.
"""


class SweidError(Exception):
    """Base exception for sweid errors."""

    pass


class LoginServiceError(SweidError):
    """The authentication collaborator failed to start a login."""

    def __init__(self, error_code: str, details: str):
        self.error_code = error_code
        self.details = details
        super().__init__(f"Login service error {error_code}: {details}")


class ConfigurationError(SweidError):
    """Invalid configuration or command line input."""

    pass
