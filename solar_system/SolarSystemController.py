import logging

from PyQt5.QtCore import QObject, pyqtSignal

from solar_system import OrderingRules
from solar_system.Planet import Planet
from solar_system.SolarSystem import SolarSystem

LOGGER = logging.getLogger(__name__)

#
# Constants
#

## (name, distance in AU, sidereal day in hours, moons) for our own system.
DEFAULT_PLANETS = (
    ("Mercury", 0.39, 1407.6, 0),
    ("Venus", 0.72, 5832.5, 0),
    ("Earth", 1.0, 23.9, 1),
    ("Mars", 1.52, 24.6, 2),
    ("Jupiter", 5.2, 9.9, 95),
    ("Saturn", 9.54, 10.7, 146),
    ("Uranus", 19.2, 17.2, 28),
    ("Neptune", 30.06, 16.1, 16),
)

#
# Class definitions
#

## The single owner of a solar system, carrying out every change requested by
#  the GUI and publishing a fresh snapshot of the planets afterwards.
class SolarSystemController(QObject):

    #
    # Qt Signal(s)
    #

    ## Emits the planets, in order, each time the solar system changes.
    planets_updated = pyqtSignal(object)

    ## The constructor.
    #  @param self The object pointer.
    #  @param parent This object's optional Qt parent.
    def __init__(self, parent=None):
        super(SolarSystemController, self).__init__(parent)
        self.solar_system = SolarSystem()

    ## Log info.
    #  @param self The object pointer.
    #  @param smsg The string message to log.
    def log_info(self, smsg):
        LOGGER.info(smsg)

    ## Log debug.
    #  @param self The object pointer.
    #  @param smsg The string message to log.
    def log_debug(self, smsg):
        LOGGER.debug(smsg)

    ## Log warn.
    #  @param self The object pointer.
    #  @param smsg The string message to log.
    def log_warn(self, smsg):
        LOGGER.warning(smsg)

    ## Log err.
    #  @param self The object pointer.
    #  @param smsg The string message to log.
    def log_err(self, smsg):
        LOGGER.error(smsg)

    ## Publish the current order of the planets.
    #  @param self The object pointer.
    def publish(self):
        self.log_debug("Publishing {0} planet(s).".format(len(self.solar_system)))
        self.planets_updated.emit(self.solar_system.planets())

    ## Add each of the default planets, then publish once.
    #  @param self The object pointer.
    def load_default_planets(self):
        for fields in DEFAULT_PLANETS:
            self.solar_system.add(Planet(*fields))
        self.log_info("Loaded {0} default planets.".format(len(DEFAULT_PLANETS)))
        self.publish()

    ## Create a planet from its fields and add it to the end of the chain.
    #  @param self The object pointer.
    #  @param name The planet's name.
    #  @param distance The distance from its sun, in AU.
    #  @param day_in_hours The length of its day, in hours.
    #  @param moons Its number of moons.
    #  @return True if the planet was added, False if it was rejected.
    def add_planet(self, name, distance, day_in_hours, moons):
        try:
            planet = Planet(name, distance, day_in_hours, moons)
        except (TypeError, ValueError) as e:
            self.log_err("Rejected planet '{0}': {1}".format(name, e))
            return False
        self.solar_system.add(planet)
        self.log_info("Added '{0}'.".format(name))
        self.publish()
        return True

    ## Remove the first planet with the given name.
    #  @param self The object pointer.
    #  @param name The name of the planet to remove.
    #  @return True if a planet was removed, False otherwise.
    def remove_planet_named(self, name):
        match = next((p for p in self.solar_system if p.get_name() == name), None)
        if not self.solar_system.remove(match):
            self.log_warn("No planet named '{0}' to remove.".format(name))
            return False
        self.log_info("Removed '{0}'.".format(name))
        self.publish()
        return True

    ## Sort the planets with one of the named ordering rules.
    #  @param self The object pointer.
    #  @param rule_name A key of OrderingRules.ORDERING_RULES.
    #  @return The number of exchanges made, or None if the rule is unknown.
    def sort_by(self, rule_name):
        rule = OrderingRules.ORDERING_RULES.get(rule_name)
        if rule is None:
            self.log_err("Unknown ordering rule '{0}'.".format(rule_name))
            return None
        exchanges = self.solar_system.sort(rule)
        self.log_info("Sorted by {0} with {1} exchange(s).".format(rule_name.lower(), exchanges))
        self.publish()
        return exchanges
