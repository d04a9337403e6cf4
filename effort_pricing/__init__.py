"""Option-pricing based effort forecasting for project tasks."""

__version__ = "0.1.0"
