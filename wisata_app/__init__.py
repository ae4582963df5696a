"""In-memory tourist-destination catalogue with login, dashboard, data management and help pages."""

__version__ = "1.0.0"
__all__ = ["__version__"]