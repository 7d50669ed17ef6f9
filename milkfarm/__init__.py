"""A terminal milking clicker game: milk, sell at the market, move to the city."""

__version__ = "0.1.0"
__all__ = ["game", "cli"]