class EthcalError(Exception):
    """Base error."""

class InvalidDateError(EthcalError, ValueError):
    """Raised when a date triple is malformed or has no counterpart in the target calendar."""
