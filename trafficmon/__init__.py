"""Network traffic sampling, connection selection, alerts, tooltips and settings."""

__version__ = "0.1.0"