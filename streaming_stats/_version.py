"""Version information for streaming_stats."""

__version__ = "0.1.0"
