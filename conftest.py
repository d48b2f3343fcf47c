"""Root conftest.py - shared registries and loader fixtures.

Step definitions for the feature files under tests/features/ live in
tests/step_defs/ and are registered here as a plugin so pytest-bdd can find
them from any test module.
"""

import pytest

from context_loader.dispatchers import DefinitionDispatcher, HookDispatcher
from context_loader.loader import AnnotatedLoader

pytest_plugins = ["tests.step_defs.loader_steps"]


@pytest.fixture
def definitions() -> DefinitionDispatcher:
    """Empty definition registry."""
    return DefinitionDispatcher()


@pytest.fixture
def hooks() -> HookDispatcher:
    """Empty hook registry."""
    return HookDispatcher()


@pytest.fixture
def loader(definitions: DefinitionDispatcher, hooks: HookDispatcher) -> AnnotatedLoader:
    """Annotated loader wired to the empty registries."""
    return AnnotatedLoader(definitions, hooks)
