"""Exceptions raised by the SFT minter before anything reaches the SDK."""


class SftMinterError(Exception):
    """Base class for errors raised by this package."""


class SetupError(SftMinterError):
    """The app id or the operator account could not be resolved."""
