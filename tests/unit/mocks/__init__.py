"""Mock classes for unit testing the context loader."""

from .mock_contexts import (
    BaseHookContext,
    ChildHookContext,
    EmptyContext,
    GrandchildHookContext,
    InheritingContext,
    LateDescriptionContext,
    MixedCaseContext,
    NeedsArgumentsContext,
    ShadowingContext,
    SkippingHookContext,
    StaticContext,
    UnknownTagContext,
    WidgetContext,
)
from .mock_reflector import FakeContext, FakeReflector, make_descriptor

__all__ = [
    "BaseHookContext",
    "ChildHookContext",
    "EmptyContext",
    "FakeContext",
    "FakeReflector",
    "GrandchildHookContext",
    "InheritingContext",
    "LateDescriptionContext",
    "MixedCaseContext",
    "NeedsArgumentsContext",
    "ShadowingContext",
    "SkippingHookContext",
    "StaticContext",
    "UnknownTagContext",
    "WidgetContext",
    "make_descriptor",
]
