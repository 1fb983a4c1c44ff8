"""Exceptions raised for broken engine contracts.

Illegal player actions are never raised; they come back as messages.
"""


class WumpusError(Exception):
    """Base class for engine errors."""


class EmptyInputError(WumpusError, ValueError):
    """A random draw was requested from an empty collection."""
