"""Fetch a web page with a plain HTTP/1.1 GET over a TCP connection."""

__version__ = "0.1.0"
__all__ = ["__version__"]