"""Method introspection for context objects."""

import inspect
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class MethodDescriptor:
    """A public method as declared on one class of a context's MRO.

    Attributes:
        owner: Class that declares this implementation.
        name: Method name.
        doc: The implementation's own docstring, not an inherited one.
        lookup_type: Class whose MRO the method was found through; needed to
            find the implementation this one overrides.
    """

    owner: type
    name: str
    doc: Optional[str]
    lookup_type: type


def _as_function(attribute: Any) -> Optional[Any]:
    if isinstance(attribute, (staticmethod, classmethod)):
        attribute = attribute.__func__
    if inspect.isfunction(attribute):
        return attribute
    return None


def _class_chain(lookup_type: type) -> Iterator[type]:
    for cls in inspect.getmro(lookup_type):
        if cls is not object:
            yield cls


class Reflector:
    """Enumerates public methods and resolves the methods they override.

    Public methods are listed in a stable order: the context class's own
    methods in definition order, then each base class's not yet seen methods
    in MRO order.
    """

    @staticmethod
    def is_public(name: str) -> bool:
        return not name.startswith("_")

    def describe(self, owner: type, name: str, lookup_type: type) -> Optional[MethodDescriptor]:
        """Describe ``owner``'s own implementation of ``name``, if it has one."""
        function = _as_function(vars(owner).get(name))
        if function is None:
            return None
        return MethodDescriptor(
            owner=owner,
            name=name,
            doc=function.__doc__,
            lookup_type=lookup_type,
        )

    def list_public_methods(self, context: Any) -> list[MethodDescriptor]:
        lookup_type = type(context)
        seen = set()
        methods = []

        for cls in _class_chain(lookup_type):
            for name in vars(cls):
                if name in seen or not self.is_public(name):
                    continue
                seen.add(name)
                # A non-method attribute still shadows methods further up the MRO.
                descriptor = self.describe(cls, name, lookup_type)
                if descriptor is not None:
                    methods.append(descriptor)

        return methods

    def resolve_overridden(self, method: MethodDescriptor) -> Optional[MethodDescriptor]:
        """Return the implementation ``method`` overrides, or ``None``."""
        chain = list(_class_chain(method.lookup_type))
        try:
            start = chain.index(method.owner) + 1
        except ValueError:
            return None

        for cls in chain[start:]:
            descriptor = self.describe(cls, method.name, method.lookup_type)
            if descriptor is not None:
                return descriptor
        return None
