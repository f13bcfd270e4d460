"""Bet quoting: odds engine, quote sequencing, bet slip view-model."""

from goatmouth.pricing.odds import format_decimal_odds, percent_from_probability, quote, quote_outcome

__all__ = ["quote", "quote_outcome", "format_decimal_odds", "percent_from_probability"]
