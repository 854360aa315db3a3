"""Errors raised by zoo commands.

A failed command leaves the zoo untouched; the console layer prints the
message and lets the player try again.
"""


class ZooError(Exception):
    """Base class for every rejected zoo action."""


class ValidationError(ZooError):
    """Insufficient funds, unknown identifier, incompatible enclosure, empty name..."""


class InvalidLoanTerm(ZooError):
    """A loan was requested with a non-positive term."""
