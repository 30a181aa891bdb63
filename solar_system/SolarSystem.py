import logging

from solar_system import OrderingRules

LOGGER = logging.getLogger(__name__)

## An element in the chain of a solar system, linking one planet to its
#  neighbors.
class SolarSystemNode(object):

    ## The constructor.
    #  @param self The object pointer.
    #  @param planet The planet held by this node, must not be None.
    #  @param before The node that comes before this one, if any.
    #  @param after The node that comes after this one, if any.
    def __init__(self, planet, before=None, after=None):
        self.planet = planet
        self.before = before
        self.after = after

## A solar system implemented as a doubly-linked list. Planets may be added to
#  or removed from it, and it may be reordered in place by any ordering rule,
#  such as the distance from the sun, the length of the day or the number of
#  moons.
#  @warning Not safe for concurrent use: a mutation must never overlap any
#  other operation, including iteration.
class SolarSystem(object):

    ## The constructor.
    #  @param self The object pointer.
    #  @param planets Optional planets to add, in order.
    def __init__(self, planets=()):
        self._head = None
        self._tail = None
        self._size = 0
        for planet in planets:
            self.add(planet)

    ## Add a planet to the end of the chain.
    #  @param self The object pointer.
    #  @param planet The planet to add.
    def add(self, planet):
        node = SolarSystemNode(planet, before=self._tail)
        if self._head is None:
            self._head = node
        else:
            self._tail.after = node
        self._tail = node
        self._size += 1
        LOGGER.debug("Added %r at position %d.", planet, self._size - 1)

    ## Remove the first planet equal to the given one from the chain.
    #  @param self The object pointer.
    #  @param planet The planet to remove.
    #  @return True if a planet was removed, False otherwise.
    def remove(self, planet):
        if planet is None or self._head is None:
            return False

        node = self._get_node(planet)
        if node is None:
            return False

        if self._head is self._tail:
            # The only element
            self._head = self._tail = None
        elif node is self._head:
            self._head = node.after
            self._head.before = None
        elif node is self._tail:
            self._tail = node.before
            self._tail.after = None
        else:
            node.before.after, node.after.before = node.after, node.before

        node.before = node.after = None
        self._size -= 1
        LOGGER.debug("Removed %r, %d planet(s) remain.", planet, self._size)
        return True

    ## Find the first node whose planet is equal to the given one.
    #  @param self The object pointer.
    #  @param planet The planet to look for.
    #  @return The node, or None if no planet matches.
    def _get_node(self, planet):
        node = self._head
        while node is not None:
            if node.planet == planet:
                return node
            node = node.after
        return None

    ## Reorder the chain in place so that, for every adjacent pair (a, b),
    #  rule(a, b) is not positive. Neighbors the rule finds equivalent are
    #  never exchanged, so the sort is stable.
    #  @param self The object pointer.
    #  @param rule A callable taking two planets and returning a negative
    #  number, zero or a positive number, like a comparison function.
    #  @return The number of exchanges made.
    def sort(self, rule):
        if not callable(rule):
            raise TypeError("The ordering rule must be callable, got {0!r}".format(rule))
        if self._head is None or self._head.after is None:
            return 0

        exchanges = 0
        passes = 0
        swapped = True
        while swapped:
            swapped = False
            passes += 1
            current = self._head
            while current.after is not None:
                if rule(current.planet, current.after.planet) > 0:
                    # The current node moves one place forward, keep comparing it
                    self._swap(current)
                    swapped = True
                    exchanges += 1
                else:
                    current = current.after

        LOGGER.debug("Sorted %d planet(s) in %d pass(es) with %d exchange(s).", self._size, passes, exchanges)
        return exchanges

    ## Exchange the given node with the node after it by relinking both of
    #  them and their outer neighbors.
    #  @warning Assumes current.after is not None.
    #  @param self The object pointer.
    #  @param current The node to swap with current.after.
    def _swap(self, current):
        after = current.after

        if after.after is not None:
            after.after.before = current
        if current.before is not None:
            current.before.after = after
        current.after = after.after
        after.before = current.before
        after.after = current
        current.before = after

        if current is self._head:
            self._head = after
        if after is self._tail:
            self._tail = current

    ## Sort the planets by their distance from their sun in AU.
    #  @param self The object pointer.
    #  @return The number of exchanges made.
    def sort_by_distance(self):
        return self.sort(OrderingRules.compare_by_distance)

    ## Sort the planets by the length of their day in Earth hours.
    #  @param self The object pointer.
    #  @return The number of exchanges made.
    def sort_by_day_length(self):
        return self.sort(OrderingRules.compare_by_day_length)

    ## Sort the planets by their number of moons.
    #  @param self The object pointer.
    #  @return The number of exchanges made.
    def sort_by_moons(self):
        return self.sort(OrderingRules.compare_by_moons)

    ## Get the first planet in the chain.
    #  @param self The object pointer.
    #  @return The planet, or None if the chain is empty.
    def first(self):
        return self._head.planet if self._head is not None else None

    ## Get the last planet in the chain.
    #  @param self The object pointer.
    #  @return The planet, or None if the chain is empty.
    def last(self):
        return self._tail.planet if self._tail is not None else None

    ## Take a snapshot of the planets in their current order, which stays
    #  valid no matter how the chain changes afterwards.
    #  @param self The object pointer.
    #  @return A list of the planets from first to last.
    def planets(self):
        return list(self)

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.planet
            node = node.after

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.planet
            node = node.before

    def __len__(self):
        return self._size

    def __contains__(self, planet):
        return planet is not None and self._get_node(planet) is not None
