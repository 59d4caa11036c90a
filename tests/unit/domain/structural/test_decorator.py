"""Tests for the Decorator demo."""

from gofpatterns.domain.structural.decorator import (
    Clothes,
    ClothesDecorator,
    Human,
    ShirtDecorator,
    ShortsDecorator,
    SocksDecorator,
    TrousersDecorator,
)


class TestDecorator:
    """Test cases for clothes decorators."""

    def test_human_alone(self, output):
        Human(output).put_on()
        assert output.lines == ["I am naked 👀 Woohoo!"]

    def test_single_decorator_delegates_first(self, output):
        ShortsDecorator(Human(output)).put_on()
        assert output.lines == ["I am naked 👀 Woohoo!", "Putting shorts on"]

    def test_decorators_stack_in_wrapping_order(self, output):
        me = Human(output)
        outfit = SocksDecorator(TrousersDecorator(ShirtDecorator(ShortsDecorator(me))))

        outfit.put_on()

        assert output.lines == [
            "I am naked 👀 Woohoo!",
            "Putting shorts on",
            "Putting shirt on",
            "Putting trousers on",
            "Putting socks on",
        ]

    def test_wrapping_does_not_change_wrapped_outfit(self, output):
        me = Human(output)
        shorts = ShortsDecorator(me)
        TrousersDecorator(shorts)

        shorts.put_on()

        assert output.lines == ["I am naked 👀 Woohoo!", "Putting shorts on"]

    def test_decorators_are_clothes(self, output):
        decorated = ShirtDecorator(Human(output))
        assert isinstance(decorated, Clothes)
        assert isinstance(decorated, ClothesDecorator)

    def test_decorator_inherits_wrapped_output(self, output):
        decorated = TrousersDecorator(Human(output))
        assert decorated.output is output
