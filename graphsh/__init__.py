"""graphsh - interactive console for graph query statements."""

__version__ = "0.1.0"

__all__ = ["__version__"]
