"""Money Calc - UK personal finance estimation calculators."""

__version__ = "0.1.0"
