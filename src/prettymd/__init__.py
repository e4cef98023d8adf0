"""AI-powered Markdown formatter for developer workflows."""

__version__ = "0.1.0"
