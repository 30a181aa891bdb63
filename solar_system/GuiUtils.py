import logging
from os.path import dirname, join as ojoin

#
# Constants
#

GUI_INSTALL_LIB_DIRECTORY = dirname(__file__)

WINDOW_TITLE = "Solar System"
LOG_LEVEL = logging.INFO

BOX_WIDTH = 200
BOX_HEIGHT = 130
SECTION_HEIGHT = 20
X_SPACE = 30
X_MARGIN = 10
Y = 10
ARROW_SIZE = 5

ELLIPSIS = "..."

#
# Global functions
#

## Get the full path of some file in this package.
#  @param url_components The remaining/suffix components of the file URL.
#  @return The absolute URL of the desired file.
def get_asset_url(*url_components):
    return ojoin(GUI_INSTALL_LIB_DIRECTORY, *url_components)

## Helper function to split a line at an equal sign.
#  @param line The string to split.
#  @return The left and right parts of the string.
def help_split(line):
    parts = line.split("=")
    return parts[0].strip(), parts[1].strip()

## Replace each '$name' placeholder of a stylesheet with its value.
#  @param style The stylesheet text.
#  @param constant_lines Lines of 'name = value' pairs, blank lines are skipped.
#  @return The resolved stylesheet.
def resolve_stylesheet(style, constant_lines):
    value_pairs = [help_split(line) for line in constant_lines if line.strip()]
    # Longest names first so '$box' never clobbers '$box_border'
    for k,v in sorted(value_pairs, key=lambda pair: len(pair[0]), reverse=True):
        style = style.replace("${0}".format(k), v)
    return style

## Helper function to set stretches of a layout at specific indices.
#  @param layout The QLayout object to set stretches for
#  @param stretches A variably-lengthed list of relative stretch factors.
def set_layout_stretches(layout, *stretches):
    for stretch in stretches:
        layout.setStretch(*stretch)

## The text lines describing a planet, one per section of its box.
#  @param planet The planet to describe.
#  @return A list of strings.
def planet_display_lines(planet):
    return [
        planet.get_name(),
        "Distance From Sun (AU): {0}".format(planet.get_distance()),
        "Day Length (hr): {0}".format(planet.get_day_in_hours()),
        "Number of Moons: {0}".format(planet.get_moons()),
    ]

## Fit the given text into a width, replacing it entirely with an ellipsis
#  when it is too wide.
#  @param text The text to fit.
#  @param measure A callable returning the width of a string, in pixels.
#  @param max_width The available width, in pixels.
#  @return The text to draw.
def elide_text(text, measure, max_width):
    return text if measure(text) <= max_width else ELLIPSIS

## Get the horizontal offset of the box at the given position.
#  @param index The position of the box, starting at 0.
#  @return The x coordinate of the box's left edge.
def box_x(index):
    return X_MARGIN + index * (BOX_WIDTH + X_SPACE)

## Get the x coordinate that centers some text in a box.
#  @param x The x coordinate of the box's left edge.
#  @param text_width The width of the text, in pixels.
#  @return The x coordinate to start drawing the text at.
def centered_text_x(x, text_width):
    return x + (BOX_WIDTH - text_width) // 2

## Get the geometry of the arrow pointing from a box to the box after it.
#  @param x The x coordinate of the box's left edge.
#  @return A tuple of the line ((x1,y1),(x2,y2)) and the arrow head points.
def next_pointer_geometry(x):
    start_x = x + BOX_WIDTH // 2
    start_y = Y + BOX_HEIGHT - SECTION_HEIGHT // 2 - SECTION_HEIGHT // 3
    end_x = x + BOX_WIDTH + X_SPACE
    head = ((end_x, start_y), (end_x - ARROW_SIZE, start_y + ARROW_SIZE), (end_x - ARROW_SIZE, start_y - ARROW_SIZE))
    return ((start_x, start_y), (end_x, start_y)), head

## Get the geometry of the arrow pointing from a box to the box before it.
#  @param x The x coordinate of the box's left edge.
#  @return A tuple of the line ((x1,y1),(x2,y2)) and the arrow head points.
def prev_pointer_geometry(x):
    start_x = x - X_SPACE
    start_y = Y + BOX_HEIGHT - SECTION_HEIGHT - SECTION_HEIGHT // 2 - SECTION_HEIGHT // 3
    end_x = x + BOX_WIDTH // 2
    head = ((start_x, start_y), (start_x + ARROW_SIZE, start_y + ARROW_SIZE), (start_x + ARROW_SIZE, start_y - ARROW_SIZE))
    return ((end_x, start_y), (start_x, start_y)), head

## Get the size a canvas needs to show the given number of boxes.
#  @param count The number of boxes.
#  @return A tuple of (width, height).
def canvas_size(count):
    width = box_x(count) - X_SPACE + X_MARGIN if count > 0 else 2 * X_MARGIN
    return width, BOX_HEIGHT + 2 * Y
