"""Building blocks for a Vertica client: connection strings, authentication, messages and logging."""

__version__ = "1.2.1"