class WallcalError(Exception):
    """Base error."""

class ConfigError(WallcalError):
    """Raised when the stored calendar configuration cannot be read or is malformed."""

class EphemerisUnavailableError(WallcalError):
    """Raised when the optional ephemeris extras (skyfield, scipy) are not installed."""
