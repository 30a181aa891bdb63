from math import isfinite

## A planet in a solar system, described by its name and a few orderable
#  quantities.
class Planet(object):

    ## The constructor.
    #  @param self The object pointer.
    #  @param name The planet's display name.
    #  @param distance The planet's distance from its sun, in AU.
    #  @param day_in_hours The length of the planet's day, in Earth hours.
    #  @param moons The planet's number of moons.
    def __init__(self, name, distance, day_in_hours, moons):
        if not name:
            raise ValueError("A planet must have a name.")
        if distance < 0:
            raise ValueError("Distance of '{0}' cannot be negative: {1}".format(name, distance))
        if day_in_hours < 0:
            raise ValueError("Day length of '{0}' cannot be negative: {1}".format(name, day_in_hours))
        if not (isfinite(distance) and isfinite(day_in_hours)):
            raise ValueError("Distance and day length of '{0}' must be finite: {1}, {2}".format(name, distance, day_in_hours))
        if moons < 0:
            raise ValueError("Moon count of '{0}' cannot be negative: {1}".format(name, moons))
        if not isfinite(moons) or moons != int(moons):
            raise ValueError("Moon count of '{0}' must be a whole number: {1}".format(name, moons))
        self._name = name
        self._distance = float(distance)
        self._day_in_hours = float(day_in_hours)
        self._moons = int(moons)

    ## Getter for the planet's name.
    #  @param self The object pointer.
    #  @return The name.
    def get_name(self):
        return self._name

    ## Getter for the planet's distance from its sun.
    #  @param self The object pointer.
    #  @return The distance in AU.
    def get_distance(self):
        return self._distance

    ## Getter for the length of the planet's day.
    #  @param self The object pointer.
    #  @return The day length in Earth hours.
    def get_day_in_hours(self):
        return self._day_in_hours

    ## Getter for the planet's number of moons.
    #  @param self The object pointer.
    #  @return The moon count.
    def get_moons(self):
        return self._moons

    def _fields(self):
        return (self._name, self._distance, self._day_in_hours, self._moons)

    ## Two planets are equal when all of their fields are equal.
    #  @param self The object pointer.
    #  @param other The object to compare against.
    def __eq__(self, other):
        if not isinstance(other, Planet):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        return "Planet({0!r}, distance={1}, day_in_hours={2}, moons={3})".format(*self._fields())
