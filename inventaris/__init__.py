"""Command-line office inventory in SQLite, with replacement checks and depreciation reports."""

__version__ = "0.1.0"