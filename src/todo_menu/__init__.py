"""In-memory interactive task list manager."""

__version__ = "0.1.0"
