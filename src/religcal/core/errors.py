class ReligcalError(Exception):
    """Base error."""

class InvalidLocationError(ReligcalError, ValueError):
    """Raised when latitude/longitude are outside their valid range."""

class InvalidDateRangeError(ReligcalError, ValueError):
    """Raised when a query range has start > end."""

class InvalidCalendarDateError(ReligcalError, ValueError):
    """Raised when a Hijri or Hebrew date has out-of-range fields."""

class PolarRegionError(ReligcalError, ArithmeticError):
    """Raised when the sun does not rise or set on the given day and latitude."""

class UnsupportedConfigurationError(ReligcalError, KeyError):
    """Raised for an unknown calculation method, madhab or denomination key."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
