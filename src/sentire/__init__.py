"""
sentire: a command-line client for the Sentry REST API.

Query events, issues, projects and organization statistics from the
terminal and render them as JSON, tables, plain text or markdown.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
