"""Context Loader Keywords for Robot Framework.

Keywords for vetting context classes: load a context and check which step
definitions, transformations and hooks its docstrings declare.

Usage:
    *** Settings ***
    Library    context_loader.robot_keywords.ContextLoaderKeywords

    *** Test Cases ***
    Feature Context Declares Its Steps
        Load context "myproject.contexts:FeatureContext"
        Definition count should be 3
        Step "I create a widget" should be defined
        Hook count should be    1    beforeScenario
"""

from typing import Optional

from robot.api.deco import keyword

from context_loader.annotations import Annotation
from context_loader.dispatchers import DefinitionDispatcher, HookDispatcher
from context_loader.importer import import_context
from context_loader.loader import AnnotatedLoader


class ContextLoaderKeywords:
    """Keywords for loading context classes and checking their declarations."""

    ROBOT_LIBRARY_SCOPE = "SUITE"
    ROBOT_LIBRARY_DOC_FORMAT = "TEXT"

    def __init__(self) -> None:
        """Initialize ContextLoaderKeywords with empty registries."""
        self.reset_registries()

    @keyword("Reset registries")
    def reset_registries(self) -> None:
        """Forget everything loaded so far."""
        self._definitions = DefinitionDispatcher()
        self._hooks = HookDispatcher()
        self._loader = AnnotatedLoader(self._definitions, self._hooks)

    @keyword('Load context "${target}"')
    def load_context(self, target: str) -> int:
        """Instantiate a context class and load its annotations.

        Maps to scenario steps:
        - 'Load context "package.module:ClassName"'

        Arguments:
            target: Context class as package.module:ClassName

        Returns:
            Number of annotations registered from this context
        """
        before = self._count_all()
        self._loader.load(import_context(target))
        loaded = self._count_all() - before
        print(f"Loaded {loaded} annotations from {target}")
        return loaded

    @keyword("Definition count should be ${count}")
    def definition_count_should_be(self, count: int) -> None:
        """Verify how many step definitions have been registered."""
        self._assert_count("definitions", self._definitions.get_definitions(), count)

    @keyword("Transformation count should be ${count}")
    def transformation_count_should_be(self, count: int) -> None:
        """Verify how many transformations have been registered."""
        self._assert_count(
            "transformations", self._definitions.get_transformations(), count
        )

    @keyword("Hook count should be")
    def hook_count_should_be(self, count: int, kind: Optional[str] = None) -> None:
        """Verify how many hooks have been registered.

        Arguments:
            count: Expected number of hooks
            kind: Only count hooks of this kind, e.g. "beforeScenario"
        """
        label = f"{kind} hooks" if kind else "hooks"
        try:
            hooks = self._hooks.get_hooks(kind)
        except ValueError as e:
            raise AssertionError(str(e)) from None
        self._assert_count(label, hooks, count)

    @keyword('Step "${pattern}" should be defined')
    def step_should_be_defined(self, pattern: str) -> None:
        """Verify a step definition with exactly this pattern was registered."""
        patterns = self.get_definition_patterns()
        if pattern not in patterns:
            raise AssertionError(
                f"No step definition '{pattern}'. Defined: {patterns}"
            )

    @keyword("Get definition patterns")
    def get_definition_patterns(self) -> list[str]:
        """Return the patterns of all registered step definitions.

        Definitions declared without a pattern are left out.
        """
        return [
            definition.argument
            for definition in self._definitions.get_definitions()
            if definition.argument is not None
        ]

    def _count_all(self) -> int:
        return (
            len(self._definitions.get_definitions())
            + len(self._definitions.get_transformations())
            + len(self._hooks.get_hooks())
        )

    @staticmethod
    def _assert_count(label: str, registered: list[Annotation], expected: int) -> None:
        expected = int(expected)
        if len(registered) != expected:
            raise AssertionError(
                f"Expected {expected} {label}, found {len(registered)}"
            )
