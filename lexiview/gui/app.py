"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from lexiview.config import ConfigManager
from lexiview.gui.main_window import MainWindow


def main():
    """Launch the Lexiview GUI application."""
    logging.basicConfig(level=logging.WARNING)

    app = QApplication(sys.argv)
    app.setApplicationName("Lexiview")
    app.setOrganizationName("Lexiview")

    window = MainWindow(ConfigManager.load_config())
    window.show()

    # Optional word to look up on start-up
    words = [arg for arg in sys.argv[1:] if not arg.startswith("-")]
    if words:
        window.search(" ".join(words))

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
