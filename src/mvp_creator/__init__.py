"""MVP package scaffolding for Android projects."""

__version__ = "0.1.0"
