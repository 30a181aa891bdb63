import logging
from sys import exit, argv as sargs, stdout

from PyQt5.QtWidgets import QApplication

from solar_system import GuiUtils
from solar_system.Gui import Gui

## Configure the logger for the 'solar_system' namespace.
#  @param level The logging level, e.g. logging.DEBUG.
#  @param log_file An optional path to also save logs to.
def setup_logging(level=GuiUtils.LOG_LEVEL, log_file=None):
    logger = logging.getLogger("solar_system")
    logger.setLevel(level)

    # Avoid duplicate logs if called again
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler = logging.StreamHandler(stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")

## Read the stylesheet and replace its placeholders with the constant values.
#  @return The stylesheet text.
def load_stylesheet():
    with open(GuiUtils.get_asset_url("style", "constants.sass"), "r") as constants_file:
        constant_lines = constants_file.readlines()
    with open(GuiUtils.get_asset_url("style", "stylesheet.qss"), "r") as stylesheet_file:
        return GuiUtils.resolve_stylesheet(stylesheet_file.read(), constant_lines)

## Main entry point of the GUI.
def main():
    setup_logging()

    # Start the app with our stylesheet
    app = QApplication(sargs)
    app.setStyleSheet(load_stylesheet())
    gui = Gui()
    exit(app.exec_())
