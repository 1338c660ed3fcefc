"""Port: Clipboard — copy text to the system clipboard."""

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copy the given text to the system clipboard.

        Raises:
            ClipboardUnavailable: If no clipboard backend accepted the text.
        """
        ...


class ClipboardStrategy(ABC):
    """One mechanism able to put text on the clipboard."""

    name: str

    @abstractmethod
    def copy(self, text: str) -> None:
        """Deliver *text* to the clipboard.

        Raises:
            StrategyFailed: The mechanism is missing or refused the text.
        """
        ...
