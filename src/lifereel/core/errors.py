"""Exceptions raised by lifereel."""


class LifeReelError(Exception):
    """Base class for lifereel errors."""


class StartupError(LifeReelError):
    """A resource needed for the run (output file, display) could not be acquired.

    Raised before any generation is computed.
    """
