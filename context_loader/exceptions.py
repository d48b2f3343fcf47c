"""Exceptions raised by the context loader."""


class ContextLoaderError(Exception):
    """Base class for all context loader errors."""


class UnknownAnnotationError(ContextLoaderError, LookupError):
    """A tag name outside the annotation vocabulary reached the factory.

    The docblock scanner only emits names from the same table the factory
    reads, so this always points at an internal inconsistency.
    """

    def __init__(self, name: str):
        super().__init__(f"Unknown annotation tag: @{name}")
        self.name = name


class UnsupportedContextError(ContextLoaderError):
    """No registered loader accepted the context."""

    def __init__(self, context: object):
        super().__init__(
            f"No loader supports context {type(context).__qualname__}"
        )
        self.context = context


class ContextImportError(ContextLoaderError, ImportError):
    """A ``module:Class`` target could not be imported or instantiated."""
