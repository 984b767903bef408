"""IP Resolution - best local IPv4 address and cached external address lookup."""

__version__ = "0.1.0"
