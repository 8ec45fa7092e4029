"""Arena markets - market identifier codec, agent bet feed and API."""

__version__ = "0.1.0"
