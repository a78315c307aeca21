"""Object-model demonstrations: prototype chains, closures and receivers."""

__version__ = "0.1.0"
