"""Tests for the cart and its discount strategies."""

from unittest.mock import Mock

import pytest

from patterns_app.behavioral.strategy import (
    Cart,
    DiscountStrategy,
    FlatDiscountStrategy,
    LineItem,
    NoDiscountStrategy,
    PercentageDiscountStrategy,
    run,
)


@pytest.fixture
def cart() -> Cart:
    cart = Cart(NoDiscountStrategy())
    cart.add_item(LineItem(name="Shirt", price=20, quantity=2))
    cart.add_item(LineItem(name="Jeans", price=50, quantity=1))
    return cart


class TestStrategies:
    """Test suite for the individual discount policies."""

    def test_no_discount(self) -> None:
        assert NoDiscountStrategy().apply_discount(90) == 90

    def test_flat_discount(self) -> None:
        assert FlatDiscountStrategy(10).apply_discount(90) == 80

    def test_percentage_discount(self) -> None:
        assert PercentageDiscountStrategy(10).apply_discount(90) == pytest.approx(81)

    def test_no_validation_of_negative_values(self) -> None:
        """Negative amounts are accepted as given."""
        assert FlatDiscountStrategy(-5).apply_discount(10) == 15
        assert PercentageDiscountStrategy(-50).apply_discount(10) == pytest.approx(15)

    def test_strategy_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            DiscountStrategy()


class TestCart:
    """Test suite for the strategy context."""

    def test_subtotal(self, cart) -> None:
        assert cart.subtotal() == 90

    def test_empty_cart_totals_zero(self) -> None:
        assert Cart(FlatDiscountStrategy(0)).total_price() == 0

    def test_swap_takes_effect_immediately(self, cart) -> None:
        """The next total uses only the newly set strategy."""
        assert cart.total_price() == 90

        cart.set_discount_strategy(FlatDiscountStrategy(10))
        assert cart.total_price() == 80

        cart.set_discount_strategy(PercentageDiscountStrategy(10))
        assert cart.total_price() == pytest.approx(81)

    def test_results_are_not_cached(self, cart) -> None:
        """Every total call consults the current strategy again."""
        strategy = Mock(spec=DiscountStrategy)
        strategy.apply_discount.side_effect = [1, 2]
        cart.set_discount_strategy(strategy)

        assert cart.total_price() == 1
        assert cart.total_price() == 2
        assert strategy.apply_discount.call_count == 2
        strategy.apply_discount.assert_called_with(90)

    def test_replaced_strategy_is_never_consulted(self, cart) -> None:
        old = Mock(spec=DiscountStrategy)
        new = Mock(spec=DiscountStrategy)
        new.apply_discount.return_value = 42
        cart.set_discount_strategy(old)
        cart.set_discount_strategy(new)

        assert cart.total_price() == 42
        old.apply_discount.assert_not_called()

    def test_items_added_after_swap_are_included(self, cart) -> None:
        cart.set_discount_strategy(FlatDiscountStrategy(10))
        cart.add_item(LineItem(name="Socks", price=5, quantity=2))
        assert cart.total_price() == 90


def test_run_output(console) -> None:
    run(console)
    assert console.lines == [
        "No Discount : 90",
        "Flat Discount : 80",
        "Percentage Discount : 81",
    ]
