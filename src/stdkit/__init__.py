"""stdkit — date/time and file URL utilities with a small CLI."""

__version__ = "0.3.0"
