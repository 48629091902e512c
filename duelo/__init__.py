"""Turn-based team battle simulator: weapons, characters and the fight loop."""

__version__ = "0.1.0"