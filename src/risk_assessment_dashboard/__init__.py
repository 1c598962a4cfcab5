"""Risk assessment dashboard: scoring, session store and Excel export."""

__version__ = "0.1.0"
