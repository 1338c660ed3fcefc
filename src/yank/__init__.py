"""yank: a tiny key-value store that copies values to the clipboard."""

__version__ = "0.1.0"
