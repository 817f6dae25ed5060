"""Stock price lookup and dividend-based maximum price, as a CLI and an HTTP API."""

__version__ = "1.0.0"