"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras + a downloaded DE file)
"""

__all__ = ["moon_table", "daylight_plot"]
