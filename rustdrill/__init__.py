"""Exercise runner that verifies, watches and tracks progress through a course."""

__version__ = "5.2.1"