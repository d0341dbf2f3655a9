"""Discord bot that answers a trigger by dropping into voice with a short clip."""

__version__ = "0.1.0"
