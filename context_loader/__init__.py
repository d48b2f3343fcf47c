"""Load step definitions, transformations and hooks from context docstrings.

A context is any object whose public methods carry ``@tag`` lines in their
docstrings::

    class FeatureContext:
        def create_widget(self, name):
            \"\"\"Creates a new widget.

            @when I create a widget named "(?P<name>\\w+)"
            \"\"\"

``AnnotatedLoader`` finds those tags and forwards each declaration to a
definition registry or a hook registry.
"""

from context_loader.annotations import (
    Annotation,
    AnnotationKind,
    Callback,
    Capability,
    build_annotation,
)
from context_loader.dispatchers import (
    DefinitionDispatcher,
    DefinitionRegistry,
    HookDispatcher,
    HookRegistry,
)
from context_loader.docblock import TagOccurrence, scan_docblock
from context_loader.exceptions import (
    ContextImportError,
    ContextLoaderError,
    UnknownAnnotationError,
    UnsupportedContextError,
)
from context_loader.loader import AnnotatedLoader, ContextReader, LoaderInterface
from context_loader.reflection import MethodDescriptor, Reflector

__all__ = [
    "AnnotatedLoader",
    "Annotation",
    "AnnotationKind",
    "Callback",
    "Capability",
    "ContextImportError",
    "ContextLoaderError",
    "ContextReader",
    "DefinitionDispatcher",
    "DefinitionRegistry",
    "HookDispatcher",
    "HookRegistry",
    "LoaderInterface",
    "MethodDescriptor",
    "Reflector",
    "TagOccurrence",
    "UnknownAnnotationError",
    "UnsupportedContextError",
    "build_annotation",
    "scan_docblock",
]
