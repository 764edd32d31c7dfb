class DigitalError(Exception):
    """Base error."""

class UnknownFunctionError(DigitalError, KeyError):
    """Raised when a function name is not in the registry."""

class MissingDependencyError(DigitalError, RuntimeError):
    """Raised when an optional extra (numpy, scipy, matplotlib) is not installed."""
