"""Terminal chat client with a persistent, replayed conversation memory."""

__version__ = "0.1.0"
