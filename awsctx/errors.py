# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                            ᚺᛖᛚ • HEL'S LEDGER
#                     Every Failure Has Its Name and Place
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   All errors raised while resolving a context derive from ContextError.
#   Each one aborts the whole flow; nothing here is retried or re-prompted.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ContextError(Exception):
    """Base class for context resolution failures."""


class NotFoundError(ContextError):
    """An explicitly requested profile is not configured."""

    def __init__(self, profile: str) -> None:
        super().__init__(f"profile {profile!r} not found")
        self.profile = profile


class AlreadyExistsError(ContextError):
    """Credentials are already stored for the profile being created."""

    def __init__(self, profile: str, path: Union[str, Path]) -> None:
        super().__init__(f"credentials for profile {profile!r} already exist in {path}")
        self.profile = profile
        self.path = Path(path)


class ValidationError(ContextError):
    """User input was rejected (empty name or region, short keys)."""


class CanceledError(ContextError):
    """The user interrupted a prompt."""

    def __init__(self, message: str = "canceled by user") -> None:
        super().__init__(message)


class ConfigFileError(ContextError):
    """Reading, parsing or writing a shared AWS file failed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigFileNotFoundError(ConfigFileError):
    """The file does not exist. Callers decide whether that means 'empty'."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"file not found: {path}", path)
