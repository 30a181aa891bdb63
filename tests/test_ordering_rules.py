"""Ordering rules and the shared numeric comparison policy."""

import pytest

from solar_system import OrderingRules
from solar_system.Planet import Planet


def test_compare_quantities_orders_ascending():
    assert OrderingRules.compare_quantities(1, 2) == OrderingRules.ORDER_BEFORE
    assert OrderingRules.compare_quantities(2, 1) == OrderingRules.ORDER_AFTER
    assert OrderingRules.compare_quantities(2, 2) == OrderingRules.ORDER_EQUIVALENT


def test_compare_quantities_uses_epsilon():
    tiny = OrderingRules.COMPARISON_EPSILON / 2
    assert OrderingRules.compare_quantities(1.0, 1.0 + tiny) == OrderingRules.ORDER_EQUIVALENT
    assert OrderingRules.compare_quantities(1.0, 1.001) == OrderingRules.ORDER_BEFORE


def test_fractional_differences_are_not_discarded():
    a = Planet("A", 1.04, 23.1, 0)
    b = Planet("B", 1.06, 23.9, 0)
    assert OrderingRules.compare_by_distance(a, b) < 0
    assert OrderingRules.compare_by_day_length(a, b) < 0
    assert OrderingRules.compare_by_day_length(b, a) > 0


def test_compare_by_moons():
    few = Planet("Few", 1, 1, 1)
    many = Planet("Many", 1, 1, 80)
    assert OrderingRules.compare_by_moons(few, many) < 0
    assert OrderingRules.compare_by_moons(many, few) > 0
    assert OrderingRules.compare_by_moons(few, Planet("Other", 9, 9, 1)) == 0


def test_ordering_by_builds_rule_from_accessor():
    rule = OrderingRules.ordering_by(Planet.get_distance)
    near = Planet("Near", 0.5, 10, 0)
    far = Planet("Far", 5, 10, 0)
    assert rule(near, far) == OrderingRules.compare_by_distance(near, far)
    assert rule(far, near) > 0


def test_registry_lists_rules_in_display_order():
    assert list(OrderingRules.ORDERING_RULES) == ["Distance", "Day length", "Moons"]
    assert OrderingRules.ORDERING_RULES["Moons"] is OrderingRules.compare_by_moons


@pytest.mark.parametrize("rule", list(OrderingRules.ORDERING_RULES.values()))
def test_rules_are_antisymmetric(rule):
    a = Planet("A", 1, 10, 3)
    b = Planet("B", 2, 20, 4)
    assert rule(a, b) == -rule(b, a)
    assert rule(a, a) == 0


def test_equal_infinities_are_equivalent():
    inf = float("inf")
    assert OrderingRules.compare_quantities(inf, inf) == OrderingRules.ORDER_EQUIVALENT
    assert OrderingRules.compare_quantities(-inf, -inf) == OrderingRules.ORDER_EQUIVALENT
    assert OrderingRules.compare_quantities(1.0, inf) == OrderingRules.ORDER_BEFORE
    assert OrderingRules.compare_quantities(inf, 1.0) == OrderingRules.ORDER_AFTER
