"""Step definitions for loading annotated contexts."""

from types import SimpleNamespace

from pytest_bdd import given, parsers, then, when

from context_loader.dispatchers import DefinitionDispatcher, HookDispatcher
from context_loader.importer import import_context
from context_loader.loader import AnnotatedLoader

MOCK_CONTEXTS = "tests.unit.mocks.mock_contexts"


def _new_registries() -> SimpleNamespace:
    definitions = DefinitionDispatcher()
    hooks = HookDispatcher()
    return SimpleNamespace(
        definitions=definitions,
        hooks=hooks,
        loader=AnnotatedLoader(definitions, hooks),
    )


@given("an annotated loader with empty registries", target_fixture="registries")
def annotated_loader_with_empty_registries() -> SimpleNamespace:
    """An annotated loader with empty registries."""
    return _new_registries()


@when(parsers.parse('the "{name}" context is loaded'))
def context_is_loaded(registries: SimpleNamespace, name: str) -> None:
    """Load one of the mock contexts."""
    registries.loader.load(import_context(f"{MOCK_CONTEXTS}:{name}"))


@when(
    parsers.parse('the "{name}" context is loaded into fresh registries'),
    target_fixture="fresh_registries",
)
def context_is_loaded_into_fresh_registries(name: str) -> SimpleNamespace:
    """Load a mock context with a second, independent loader."""
    fresh = _new_registries()
    fresh.loader.load(import_context(f"{MOCK_CONTEXTS}:{name}"))
    return fresh


@then(parsers.parse("{count:d} step definitions are registered"))
def step_definitions_registered(registries: SimpleNamespace, count: int) -> None:
    definitions = registries.definitions.get_definitions()
    assert len(definitions) == count, f"Expected {count} step definitions, got {definitions}"


@then(parsers.parse("{count:d} transformations are registered"))
def transformations_registered(registries: SimpleNamespace, count: int) -> None:
    transformations = registries.definitions.get_transformations()
    assert len(transformations) == count, (
        f"Expected {count} transformations, got {transformations}"
    )


@then(parsers.parse("{count:d} hooks are registered"))
def hooks_registered(registries: SimpleNamespace, count: int) -> None:
    hooks = registries.hooks.get_hooks()
    assert len(hooks) == count, f"Expected {count} hooks, got {hooks}"


@then(parsers.parse("{count:d} hooks are registered in the fresh registries"))
def hooks_registered_in_fresh_registries(fresh_registries: SimpleNamespace, count: int) -> None:
    assert len(fresh_registries.hooks.get_hooks()) == count
    assert fresh_registries.definitions.get_definitions() == []


@then(
    parsers.parse(
        'step definition {position:d} is a "{kind}" step with pattern "{pattern}"'
    )
)
def step_definition_has_pattern(
    registries: SimpleNamespace, position: int, kind: str, pattern: str
) -> None:
    """Check kind and pattern of the n-th registered step definition."""
    definition = registries.definitions.get_definitions()[position - 1]
    assert definition.kind.value == kind
    assert definition.argument == pattern


@then(parsers.parse("step definition {position:d} has no description"))
def step_definition_has_no_description(registries: SimpleNamespace, position: int) -> None:
    definition = registries.definitions.get_definitions()[position - 1]
    assert definition.description is None


@then(parsers.parse('step definition {position:d} is described as "{description}"'))
def step_definition_is_described(
    registries: SimpleNamespace, position: int, description: str
) -> None:
    definition = registries.definitions.get_definitions()[position - 1]
    assert definition.description == description


@then(parsers.parse('the hooks are registered in the order "{kinds}"'))
def hooks_registered_in_order(registries: SimpleNamespace, kinds: str) -> None:
    """Check the registration order of hook kinds."""
    expected = [kind.strip() for kind in kinds.split(",")]
    assert [hook.kind.value for hook in registries.hooks.get_hooks()] == expected
