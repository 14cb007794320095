"""Decision-support analytics for basketball lineups and game scenarios."""

__version__ = "0.1.0"
