"""GoatMouth core - bet quoting, odds formatting, and activity feed aggregation."""

__version__ = "0.1.0"
