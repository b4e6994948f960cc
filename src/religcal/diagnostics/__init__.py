"""Diagnostics package.

- easter_table, hijri_drift: stdlib / numpy console reports
- easter_scatter: optional plot (requires the diagnostics extra)
"""

__all__ = ["easter_table", "easter_scatter", "hijri_drift"]
