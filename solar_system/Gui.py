from functools import partial

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, \
    QScrollArea, QPushButton, QComboBox, QLabel

from solar_system import GuiUtils, OrderingRules
from solar_system.SolarSystemCanvas import SolarSystemCanvas
from solar_system.SolarSystemController import SolarSystemController

## The class encapsulating the display for the app's contents.
class Gui(QMainWindow):

    ## The constructor.
    #  @param self The object pointer.
    #  @param parent This object's optional Qt parent.
    def __init__(self, parent=None):
        super(Gui, self).__init__(parent)

        #
        # Local variable(s)
        #

        # The controller owns the solar system, this window only sees snapshots
        self.controller = SolarSystemController(parent=self)

        #
        # Basic UI/cosmetics
        #

        self.setWindowTitle(GuiUtils.WINDOW_TITLE)
        central = QWidget(self)
        self.overall_layout = QVBoxLayout(central)

        self.canvas = SolarSystemCanvas()
        self.scroll_area = QScrollArea(central)
        self.scroll_area.setWidget(self.canvas)
        self.scroll_area.setWidgetResizable(True)
        self.overall_layout.addWidget(self.scroll_area)

        self.menu_layout = QHBoxLayout()
        self.menu_layout.addWidget(QLabel("Sort by:", central))
        self.sort_btns = []
        for rule_name in OrderingRules.ORDERING_RULES:
            btn = QPushButton(rule_name, central)
            btn.released.connect(partial(self.controller.sort_by, rule_name))
            self.menu_layout.addWidget(btn)
            self.sort_btns.append(btn)
        self.menu_layout.addStretch(1)
        self.remove_dropdown = QComboBox(central)
        self.menu_layout.addWidget(self.remove_dropdown)
        self.remove_btn = QPushButton("Remove", central)
        self.menu_layout.addWidget(self.remove_btn)
        self.overall_layout.addLayout(self.menu_layout)

        GuiUtils.set_layout_stretches(
            self.overall_layout,
            (0,85),
            (1,15)
        )
        self.setCentralWidget(central)

        #
        # Make Qt connections
        #

        self.controller.planets_updated.connect(self.canvas.set_planets)
        self.controller.planets_updated.connect(self.update_remove_dropdown)
        self.remove_btn.released.connect(self.remove_selected_planet)

        #
        # Any immediately-prior initialization
        #

        self.controller.load_default_planets()

        # Done
        self.show()

    ## Override key press event to safely quit the app on pressing ESCAPE.
    #  @param self The object pointer.
    #  @param evt The key-press event.
    def keyPressEvent(self, evt):
        if evt.key() == Qt.Key_Escape:
            self.close()

    ## Refill the dropdown of removable planets.
    #  @param self The object pointer.
    #  @param planets The planets in their current order.
    def update_remove_dropdown(self, planets):
        self.remove_dropdown.clear()
        self.remove_dropdown.addItems([p.get_name() for p in planets])
        self.remove_btn.setEnabled(len(planets) > 0)

    ## The callback to remove the planet selected in the dropdown.
    #  @param self The object pointer.
    def remove_selected_planet(self):
        name = self.remove_dropdown.currentText()
        if name:
            self.controller.remove_planet_named(name)
