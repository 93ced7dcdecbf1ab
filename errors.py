"""Exceptions raised by the settlement service."""


class SettleUpError(Exception):
    """Base exception for all settlement errors."""
    pass


class MissingMembersError(SettleUpError):
    """Raised when a group record has no member universe to aggregate over."""
    pass


class ConfigurationError(SettleUpError):
    """Raised when an environment setting cannot be parsed."""
    pass
