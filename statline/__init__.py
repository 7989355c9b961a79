"""Status components and a status bar loop that joins them into one line."""

__version__ = "1.1.0"