"""Domain errors — custom exceptions for yank.

These exceptions are raised by the store, the clipboard writer and the
configuration loader, and caught by the presentation layer, which prints
the message and exits non-zero.
"""


class YankError(Exception):
    """Base exception for all yank errors."""


class NoKeyProvided(YankError):
    """Raised when the default action is invoked without a key."""

    def __init__(self) -> None:
        super().__init__("No key provided")


class HomeDirNotFound(YankError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Could not find home directory")


class StoreIOError(YankError):
    """Raised when the data file or its directory cannot be read or written."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"I/O error: {detail}")


class StoreParseError(YankError):
    """Raised when the data file is not a valid store document."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to parse data file: {detail}")


class KeyNotFound(YankError):
    """Raised when a key has no stored value."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No value found for '{key}'")


class ConfigurationError(YankError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Invalid configuration: {detail}")


class ClipboardError(YankError):
    """Raised when clipboard operations fail."""


class StrategyFailed(ClipboardError):
    """Raised by a single clipboard strategy; the writer moves on to the next one."""


class ClipboardUnavailable(ClipboardError):
    """Raised when every clipboard strategy failed."""

    DEFAULT_MESSAGE = (
        "No clipboard utility found. Please install wl-copy (Wayland), "
        "xclip/xsel (X11), or pbcopy (macOS)"
    )

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)
