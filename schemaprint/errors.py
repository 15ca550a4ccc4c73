from typing import Optional


class SchemaPrintError(Exception):
    """Base class for everything schemaprint raises on purpose."""

class ConfigurationError(SchemaPrintError):
    """Indicates missing or malformed user input, detected before any I/O."""

class FetchError(SchemaPrintError):
    """The introspection request failed or the server rejected it."""
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code

class IntrospectionParseError(SchemaPrintError):
    """The introspection response is not JSON, or not shaped like one."""
    def __init__(self, message: str, snippet: str = '') -> None:
        if snippet:
            message = f"{message}\nResponse starts with: {snippet}"
        super().__init__(message)
        self.snippet = snippet

class OutputError(SchemaPrintError):
    """A schema file could not be written."""
