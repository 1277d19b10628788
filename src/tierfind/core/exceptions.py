"""Domain exceptions for tierfind.

All library errors inherit from TierfindError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

"Nothing found" is never an exception: lookups return an empty list or None.
"""

from __future__ import annotations


class TierfindError(Exception):
    """Base class for all tierfind exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(TierfindError):
    """Raised for malformed search keys or path inputs.

    Attributes:
        value: The offending input, as given by the caller.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        value: object = None,
        cause: Exception | None = None,
    ) -> None:
        self.value = value
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Describe the accepted shape of search keys and directories."""
        return (
            "Pass search keys as plain file names (a string or a non-empty "
            "list of strings per tier) and directories as valid paths"
        )
