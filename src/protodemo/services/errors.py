"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a factory cannot build a value object."""


class DemoError(Exception):
    """Base exception for running demonstrations."""


class UnknownDemoError(DemoError):
    """Raised when a requested demonstration unit does not exist."""
