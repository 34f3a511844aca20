"""maxcal: pick the foods with the most calories that fit a weight limit."""

__version__ = "0.1.0"
