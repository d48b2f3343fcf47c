"""Registries that receive loaded annotations."""

import logging
from typing import Optional, Protocol, Union

from .annotations import CAPABILITIES, Annotation, AnnotationKind, Capability

logger = logging.getLogger(__name__)

HOOK_KINDS = [
    kind.value for kind, capability in CAPABILITIES.items()
    if capability is Capability.HOOK
]


class DefinitionRegistry(Protocol):
    """Receives step definitions and transformations."""

    def add_definition(self, definition: Annotation) -> None: ...

    def add_transformation(self, transformation: Annotation) -> None: ...


class HookRegistry(Protocol):
    """Receives lifecycle hooks."""

    def add_hook(self, hook: Annotation) -> None: ...


class DefinitionDispatcher:
    """In-memory definition registry, kept in registration order."""

    def __init__(self) -> None:
        self._definitions: list[Annotation] = []
        self._transformations: list[Annotation] = []

    def add_definition(self, definition: Annotation) -> None:
        logger.debug("Definition added: %s %r", definition.kind.value, definition.argument)
        self._definitions.append(definition)

    def add_transformation(self, transformation: Annotation) -> None:
        logger.debug("Transformation added: %r", transformation.argument)
        self._transformations.append(transformation)

    def get_definitions(self) -> list[Annotation]:
        return list(self._definitions)

    def get_transformations(self) -> list[Annotation]:
        return list(self._transformations)


class HookDispatcher:
    """In-memory hook registry, kept in registration order."""

    def __init__(self) -> None:
        self._hooks: list[Annotation] = []

    def add_hook(self, hook: Annotation) -> None:
        logger.debug("Hook added: %s on %s", hook.kind.value, hook.callback)
        self._hooks.append(hook)

    def get_hooks(self, kind: Optional[Union[AnnotationKind, str]] = None) -> list[Annotation]:
        """Return registered hooks, optionally only those of one kind.

        Args:
            kind: Kind or tag name, e.g. ``"beforeScenario"`` (any case).

        Raises:
            ValueError: ``kind`` is not a hook kind.
        """
        if kind is None:
            return list(self._hooks)
        name = kind.lower()
        if name not in HOOK_KINDS:
            raise ValueError(
                f"Unknown hook kind {name!r}, expected one of: {', '.join(HOOK_KINDS)}"
            )
        kind = AnnotationKind(name)
        return [hook for hook in self._hooks if hook.kind is kind]
