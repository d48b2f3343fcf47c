"""Import context classes from ``package.module:ClassName`` targets."""

import importlib
from typing import Any

from .exceptions import ContextImportError


def import_context(target: str) -> Any:
    """Import the class named by ``target`` and instantiate it.

    Args:
        target: ``package.module:ClassName``; nested classes may be given as
            ``module:Outer.Inner``.

    Returns:
        A new context instance built with no arguments.

    Raises:
        ContextImportError: The target is malformed, the module or class is
            missing, or the class cannot be instantiated without arguments.
    """
    module_path, sep, class_path = target.partition(":")
    if not sep or not module_path or not class_path:
        raise ContextImportError(f"Expected 'module:ClassName', got {target!r}")

    try:
        obj = importlib.import_module(module_path)
    except ImportError as e:
        raise ContextImportError(f"Cannot import module {module_path!r}: {e}") from e

    for attr in class_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise ContextImportError(
                f"Module {module_path!r} has no attribute {class_path!r}"
            ) from None

    if not isinstance(obj, type):
        raise ContextImportError(f"{target!r} is not a class")

    try:
        return obj()
    except TypeError as e:
        raise ContextImportError(f"Cannot instantiate {target!r}: {e}") from e
