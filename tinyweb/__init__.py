"""A small blocking HTTP server with fixed routes, a greeting form and file uploads, plus a client."""

__version__ = "0.1.0"