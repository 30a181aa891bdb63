from PyQt5.QtCore import Qt, QPoint
from PyQt5.QtGui import QPainter, QPolygon
from PyQt5.QtWidgets import QWidget

from solar_system import GuiUtils

## A widget drawing the planets of a solar system as a chain of boxes, with
#  arrows between neighbors. It only ever holds a snapshot of the planets,
#  never the solar system itself.
class SolarSystemCanvas(QWidget):

    ## The constructor.
    #  @param self The object pointer.
    #  @param parent This object's optional Qt parent.
    def __init__(self, parent=None):
        super(SolarSystemCanvas, self).__init__(parent)
        # Let the stylesheet paint the background
        self.setAttribute(Qt.WA_StyledBackground, True)
        # Local variable(s)
        self.planets = []
        self.set_planets([])

    ## Replace the snapshot of planets to draw and schedule a repaint.
    #  @param self The object pointer.
    #  @param planets The planets in their current order.
    def set_planets(self, planets):
        self.planets = list(planets)
        self.setMinimumSize(*GuiUtils.canvas_size(len(self.planets)))
        self.update()

    ## Override paintEvent to draw every planet's box.
    #  @param self The object pointer.
    #  @param evt The paint event.
    def paintEvent(self, evt):
        painter = QPainter(self)
        try:
            last_index = len(self.planets) - 1
            for i,planet in enumerate(self.planets):
                self.paint_box(painter, GuiUtils.box_x(i), planet, i > 0, i < last_index)
        finally:
            painter.end()

    ## Draw a single planet's box and its arrows.
    #  @param self The object pointer.
    #  @param painter The active QPainter.
    #  @param x The x coordinate of the box's left edge.
    #  @param planet The planet to describe.
    #  @param has_before Whether an arrow to a previous box is drawn.
    #  @param has_after Whether an arrow to a next box is drawn.
    def paint_box(self, painter, x, planet, has_before, has_after):
        painter.drawRect(x, GuiUtils.Y, GuiUtils.BOX_WIDTH, GuiUtils.BOX_HEIGHT)
        for y2 in range(GuiUtils.SECTION_HEIGHT, GuiUtils.BOX_HEIGHT, GuiUtils.SECTION_HEIGHT):
            painter.drawLine(x, GuiUtils.Y + y2, x + GuiUtils.BOX_WIDTH, GuiUtils.Y + y2)

        for i,line in enumerate(GuiUtils.planet_display_lines(planet)):
            self.paint_text(painter, x, GuiUtils.Y + GuiUtils.SECTION_HEIGHT * (i+1) - 5, line)

        if has_before:
            self.paint_pointer(painter, GuiUtils.prev_pointer_geometry(x))
        if has_after:
            self.paint_pointer(painter, GuiUtils.next_pointer_geometry(x))

    ## Draw some text centered in a box, or an ellipsis if it does not fit.
    #  @param self The object pointer.
    #  @param painter The active QPainter.
    #  @param x The x coordinate of the box's left edge.
    #  @param y The baseline of the text.
    #  @param text The text to draw.
    def paint_text(self, painter, x, y, text):
        metrics = painter.fontMetrics()
        shown = GuiUtils.elide_text(text, metrics.horizontalAdvance, GuiUtils.BOX_WIDTH)
        painter.drawText(GuiUtils.centered_text_x(x, metrics.horizontalAdvance(shown)), y, shown)

    ## Draw an arrow given its line and head.
    #  @param self The object pointer.
    #  @param painter The active QPainter.
    #  @param geometry The (line, head) tuple from GuiUtils.
    def paint_pointer(self, painter, geometry):
        (start, end), head = geometry
        painter.drawLine(QPoint(*start), QPoint(*end))
        painter.setBrush(painter.pen().color())
        painter.drawPolygon(QPolygon([QPoint(*point) for point in head]))
