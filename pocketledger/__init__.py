"""Personal income and expense ledger with JSON storage, reports and a terminal menu."""

__version__ = "0.1.0"