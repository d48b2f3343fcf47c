"""Annotation records built from docblock tags.

Every recognised tag maps to exactly one ``AnnotationKind`` and every kind
belongs to exactly one capability group:

- definitions: ``@given``, ``@when``, ``@then``
- transformations: ``@transform``
- hooks: ``@beforesuite``, ``@aftersuite``, ``@beforefeature``,
  ``@afterfeature``, ``@beforescenario``, ``@afterscenario``,
  ``@beforestep``, ``@afterstep``
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Optional

from .exceptions import UnknownAnnotationError


class Capability(Enum):
    """Registry an annotation is routed to."""

    DEFINITION = "definition"
    TRANSFORMATION = "transformation"
    HOOK = "hook"


class AnnotationKind(str, Enum):
    """The closed vocabulary of docblock tags, lower-cased."""

    GIVEN = "given"
    WHEN = "when"
    THEN = "then"
    TRANSFORM = "transform"
    BEFORE_SUITE = "beforesuite"
    AFTER_SUITE = "aftersuite"
    BEFORE_FEATURE = "beforefeature"
    AFTER_FEATURE = "afterfeature"
    BEFORE_SCENARIO = "beforescenario"
    AFTER_SCENARIO = "afterscenario"
    BEFORE_STEP = "beforestep"
    AFTER_STEP = "afterstep"

    @property
    def capability(self) -> Capability:
        return CAPABILITIES[self]


CAPABILITIES = {
    AnnotationKind.GIVEN: Capability.DEFINITION,
    AnnotationKind.WHEN: Capability.DEFINITION,
    AnnotationKind.THEN: Capability.DEFINITION,
    AnnotationKind.TRANSFORM: Capability.TRANSFORMATION,
    AnnotationKind.BEFORE_SUITE: Capability.HOOK,
    AnnotationKind.AFTER_SUITE: Capability.HOOK,
    AnnotationKind.BEFORE_FEATURE: Capability.HOOK,
    AnnotationKind.AFTER_FEATURE: Capability.HOOK,
    AnnotationKind.BEFORE_SCENARIO: Capability.HOOK,
    AnnotationKind.AFTER_SCENARIO: Capability.HOOK,
    AnnotationKind.BEFORE_STEP: Capability.HOOK,
    AnnotationKind.AFTER_STEP: Capability.HOOK,
}

# Tag name -> kind. The docblock scanner builds its tag pattern from these keys.
ANNOTATION_KINDS = {kind.value: kind for kind in AnnotationKind}


class Callback(NamedTuple):
    """Identifies the context method an annotation was declared on."""

    owner: str
    method: str

    @classmethod
    def for_method(cls, context_type: type, method: str) -> "Callback":
        return cls(f"{context_type.__module__}.{context_type.__qualname__}", method)

    def resolve(self, context: Any) -> Any:
        """Return the bound method on ``context`` this callback points at."""
        return getattr(context, self.method)

    def __str__(self) -> str:
        return f"{self.owner}::{self.method}"


@dataclass(frozen=True)
class Annotation:
    """A step definition, transformation or hook declared in a docblock.

    Attributes:
        kind: Which tag declared it.
        callback: The context method to invoke.
        argument: Tag content (a step pattern, a transformation pattern or a
            hook filter); ``None`` when the tag carried no content.
        description: First free-text line of the docblock above the tag.
    """

    kind: AnnotationKind
    callback: Callback
    argument: Optional[str] = None
    description: Optional[str] = None

    @property
    def capability(self) -> Capability:
        return self.kind.capability

    @property
    def is_definition(self) -> bool:
        return self.capability is Capability.DEFINITION

    @property
    def is_transformation(self) -> bool:
        return self.capability is Capability.TRANSFORMATION

    @property
    def is_hook(self) -> bool:
        return self.capability is Capability.HOOK

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "capability": self.capability.value,
            "callback": str(self.callback),
            "argument": self.argument,
            "description": self.description,
        }


def build_annotation(
    name: str,
    content: str,
    callback: Callback,
    description: Optional[str] = None,
) -> Annotation:
    """Build the annotation for a tag found in a docblock.

    Args:
        name: Lower-cased tag name, e.g. ``"beforescenario"``.
        content: Joined tag content; empty means no argument.
        callback: Method the annotation belongs to.
        description: Description captured before the tag, if any.

    Returns:
        The immutable annotation record.

    Raises:
        UnknownAnnotationError: ``name`` is not in the tag vocabulary.
    """
    try:
        kind = ANNOTATION_KINDS[name]
    except KeyError:
        raise UnknownAnnotationError(name) from None

    return Annotation(
        kind=kind,
        callback=callback,
        argument=content or None,
        description=description,
    )
