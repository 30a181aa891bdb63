"""Rendering smoke tests, run on Qt's offscreen platform."""

import pytest
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QApplication

from solar_system import GuiUtils
from solar_system.Planet import Planet
from solar_system.SolarSystem import SolarSystem
from solar_system.SolarSystemCanvas import SolarSystemCanvas


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def test_canvas_holds_a_snapshot(qapp):
    system = SolarSystem([Planet("Earth", 1, 23.9, 1), Planet("Mars", 1.52, 24.6, 2)])
    canvas = SolarSystemCanvas()
    canvas.set_planets(system)
    system.remove(Planet("Earth", 1, 23.9, 1))
    assert [p.get_name() for p in canvas.planets] == ["Earth", "Mars"]


def test_canvas_grows_with_planets(qapp):
    canvas = SolarSystemCanvas()
    canvas.set_planets([Planet(str(i), i, 10, 0) for i in range(3)])
    width, height = GuiUtils.canvas_size(3)
    assert canvas.minimumWidth() == width
    assert canvas.minimumHeight() == height


def test_canvas_paints_without_errors(qapp):
    canvas = SolarSystemCanvas()
    canvas.set_planets([
        Planet("Earth", 1, 23.9, 1),
        Planet("A planet with a name far too long to fit inside its box", 2, 10, 0),
    ])
    canvas.resize(*GuiUtils.canvas_size(2))
    assert not canvas.grab().isNull()


def test_canvas_background_follows_stylesheet(qapp):
    canvas = SolarSystemCanvas()
    assert canvas.testAttribute(Qt.WA_StyledBackground)
