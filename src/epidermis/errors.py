"""
Exception types raised by the epidermis core.
"""


class EpidermisError(Exception):
    """Base class for all epidermis errors."""


class InvalidArgument(EpidermisError, ValueError):
    """Malformed input: bad seeding bounds, negative counts or diameters."""


class InconsistentState(EpidermisError, RuntimeError):
    """An agent's attached behavior does not match its differentiation type."""
