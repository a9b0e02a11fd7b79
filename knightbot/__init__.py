"""Command handlers, chat model and dispatcher for a chat bot."""

__version__ = "1.0.0"