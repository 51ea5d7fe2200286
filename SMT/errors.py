from typing import Optional


class SMTError(Exception):
    """Base class for every error the merge tool reports to its caller."""


class DecodeError(SMTError, ValueError):
    """Input could not be read or does not have the SPDX 2.3 document shape."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class VersionMismatch(SMTError, ValueError):
    """Both documents parsed, but at least one declares an unsupported spdxVersion."""

    def __init__(self, first: str, second: str, expected: str) -> None:
        self.first = first
        self.second = second
        self.expected = expected
        super().__init__(
            f"Only support {expected} version, got '{first}' and '{second}'"
        )


class EncodeError(SMTError):
    """The merged document could not be serialized."""
