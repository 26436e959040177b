"""Bootstrap a local development setup folder and example configuration."""

__version__ = "0.1.0"