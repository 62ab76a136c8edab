"""String, UTF-8, status, rapidhash, line reading and IPv4 parsing utilities."""

__version__ = "0.1.0"