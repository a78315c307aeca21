"""Exceptions raised by the object model."""


class ObjectModelError(Exception):
    """Base exception for the object model."""


class PrototypeCycleError(ObjectModelError):
    """Raised when linking a prototype would make the chain circular."""


class ConstructorInvocationError(ObjectModelError, TypeError):
    """Raised when a class kind is called without the construct operator."""
