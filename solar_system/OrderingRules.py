from collections import OrderedDict

#
# Constants
#

## Two quantities closer than this are treated as equivalent by every rule.
COMPARISON_EPSILON = 1e-9

## Results of an ordering rule applied to (a, b).
ORDER_BEFORE = -1
ORDER_EQUIVALENT = 0
ORDER_AFTER = 1

#
# Global functions
#

## Compare two real numbers using the shared tolerance.
#  @param a The first quantity.
#  @param b The second quantity.
#  @return ORDER_BEFORE if a is smaller, ORDER_AFTER if a is larger, or
#  ORDER_EQUIVALENT if they are within COMPARISON_EPSILON of each other.
def compare_quantities(a, b):
    # Checked first so equal infinities are equivalent
    if a == b or abs(a - b) <= COMPARISON_EPSILON:
        return ORDER_EQUIVALENT
    return ORDER_BEFORE if a < b else ORDER_AFTER

## Build an ascending ordering rule over one numeric field of a planet.
#  @param accessor A callable taking a planet and returning the field's value.
#  @return A rule taking (a, b) and returning <0, 0 or >0.
def ordering_by(accessor):
    def rule(a, b):
        return compare_quantities(accessor(a), accessor(b))
    return rule

## Order planets by their distance from their sun.
#  @param a The first planet.
#  @param b The second planet.
#  @return The comparison result.
def compare_by_distance(a, b):
    return compare_quantities(a.get_distance(), b.get_distance())

## Order planets by the length of their day.
#  @param a The first planet.
#  @param b The second planet.
#  @return The comparison result.
def compare_by_day_length(a, b):
    return compare_quantities(a.get_day_in_hours(), b.get_day_in_hours())

## Order planets by their number of moons.
#  @param a The first planet.
#  @param b The second planet.
#  @return The comparison result.
def compare_by_moons(a, b):
    return compare_quantities(a.get_moons(), b.get_moons())

## The available rules, keyed by a user-friendly name, in display order.
ORDERING_RULES = OrderedDict([
    ("Distance", compare_by_distance),
    ("Day length", compare_by_day_length),
    ("Moons", compare_by_moons),
])
