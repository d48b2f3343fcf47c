"""Context loaders.

``AnnotatedLoader`` reads step definitions, transformations and hooks from the
docstrings of a context's public methods and hands them to the definition and
hook registries. ``ContextReader`` picks the loaders that apply to a context.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from .annotations import Annotation, Callback, Capability, build_annotation
from .dispatchers import DefinitionRegistry, HookRegistry
from .docblock import scan_docblock
from .exceptions import UnsupportedContextError
from .reflection import MethodDescriptor, Reflector

logger = logging.getLogger(__name__)


class LoaderInterface(ABC):
    """A strategy for loading declarations from a context."""

    @abstractmethod
    def supports(self, context: Any) -> bool:
        """Check if the loader can load from ``context``."""

    @abstractmethod
    def load(self, context: Any) -> None:
        """Load declarations from ``context`` into the registries."""


class AnnotatedLoader(LoaderInterface):
    """Loads declarations written as ``@tag`` lines in method docstrings.

    Annotations a method inherits through the implementations it overrides
    are registered before its own, furthest ancestor first.
    """

    def __init__(
        self,
        definitions: DefinitionRegistry,
        hooks: HookRegistry,
        reflector: Optional[Reflector] = None,
    ):
        self.definitions = definitions
        self.hooks = hooks
        self.reflector = reflector or Reflector()

    def supports(self, context: Any) -> bool:
        return True

    def load(self, context: Any) -> None:
        annotations = self.read_annotations(context)
        for annotation in annotations:
            self._register(annotation)

        logger.info(
            "Loaded %d annotations from %s",
            len(annotations),
            type(context).__qualname__,
        )

    def read_annotations(self, context: Any) -> list[Annotation]:
        """Discover all annotations of ``context`` without registering them."""
        context_type = type(context)
        annotations = []
        for method in self.reflector.list_public_methods(context):
            callback = Callback.for_method(context_type, method.name)
            for descriptor in self._override_chain(method):
                annotations.extend(self._read_method_annotations(descriptor, callback))
        return annotations

    def _override_chain(self, method: MethodDescriptor) -> list[MethodDescriptor]:
        """Return ``method`` and what it overrides, furthest ancestor first."""
        chain = []
        current = method
        while current is not None and current not in chain:
            chain.append(current)
            current = self.reflector.resolve_overridden(current)
        chain.reverse()
        return chain

    def _read_method_annotations(
        self, method: MethodDescriptor, callback: Callback
    ) -> list[Annotation]:
        return [
            build_annotation(tag.name, tag.content, callback, tag.description)
            for tag in scan_docblock(method.doc)
        ]

    def _register(self, annotation: Annotation) -> None:
        capability = annotation.capability
        if capability is Capability.DEFINITION:
            self.definitions.add_definition(annotation)
        elif capability is Capability.TRANSFORMATION:
            self.definitions.add_transformation(annotation)
        else:
            self.hooks.add_hook(annotation)

        logger.debug(
            "Registered @%s %r from %s",
            annotation.kind.value,
            annotation.argument,
            annotation.callback,
        )


class ContextReader:
    """Loads contexts through every registered loader that supports them."""

    def __init__(self, loaders: Iterable[LoaderInterface] = ()):
        self._loaders = list(loaders)

    def add_loader(self, loader: LoaderInterface) -> None:
        self._loaders.append(loader)

    def read(self, context: Any) -> int:
        """Load ``context`` and return how many loaders ran.

        Raises:
            UnsupportedContextError: No loader supports the context.
        """
        used = 0
        for loader in self._loaders:
            if loader.supports(context):
                loader.load(context)
                used += 1

        if not used:
            raise UnsupportedContextError(context)
        return used
