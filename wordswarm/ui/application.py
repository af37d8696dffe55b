import sys

from PySide6.QtCore import QCoreApplication, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from wordswarm import __version__
from wordswarm.services.logs import configure_logging

from .main_window import MainWindow


def create_application() -> QApplication:
    """
    Create the application.
    """
    QCoreApplication.setOrganizationName("Word Swarm")
    QCoreApplication.setApplicationName("Word Swarm")
    configure_logging()

    app = QApplication(sys.argv)
    app.setApplicationVersion(__version__)
    QGuiApplication.setApplicationDisplayName("Word Swarm")

    window = MainWindow()
    window.show()

    # Start loading and animating once the event loop runs
    QTimer.singleShot(0, window.start)
    # Keep the window alive for the lifetime of the application
    app.main_window = window  # type: ignore[attr-defined]
    return app
