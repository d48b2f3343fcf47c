"""Hand-written context classes for unit and scenario tests."""


class WidgetContext:
    """Context declaring one of each capability."""

    def simple_step(self):
        """@given a simple step"""

    def create_widget(self):
        """Creates a new widget.

        @when I create a widget
        """

    def check_result(self):
        """
        @then the result is
            a multi-line
            argument
        """

    def cast_number(self, value):
        r"""@Transform /^\d+$/"""
        return int(value)

    def prepare(self):
        """@beforeSuite"""

    def helper(self):
        """Not a declaration."""

    def undocumented(self):
        pass

    def _private(self):
        """@given a private step"""


class InheritingContext(WidgetContext):
    """Inherits every method of WidgetContext without overriding any."""


class BaseHookContext:
    def reset(self):
        """@beforeScenario"""


class ChildHookContext(BaseHookContext):
    def reset(self):
        """@afterScenario"""


class GrandchildHookContext(ChildHookContext):
    def reset(self):
        """@afterStep"""


class SkippingHookContext(ChildHookContext):
    """Overrides nothing itself; the chain still starts at ChildHookContext."""

    def extra(self):
        """@beforeStep"""


class MixedCaseContext:
    def upper(self):
        """@GIVEN one"""

    def title(self):
        """@Given two"""

    def lower(self):
        """@given three"""


class UnknownTagContext:
    def documented(self):
        """@unknown foo
        Runs the thing.
        @given a thing runs
        """


class LateDescriptionContext:
    def steps(self):
        """
        @given first
        Describes later tags.
        @when second
        @then third
        """


class StaticContext:
    @staticmethod
    def static_step():
        """@given a static step"""

    @classmethod
    def class_step(cls):
        """@when a class step"""

    label = "not a method"


class ShadowingContext(WidgetContext):
    simple_step = None


class EmptyContext:
    pass


class NeedsArgumentsContext:
    def __init__(self, required):
        self.required = required
