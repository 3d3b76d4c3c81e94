"""CodeGraph Offline: heuristic structural graphs for multi-language source trees."""

__version__ = "0.1.0"
