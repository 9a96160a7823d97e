"""A small development HTTP server, HTTP request-line parsing and an INI-style configuration reader."""

__version__ = "1.0.0"