"""Main entry point for Word Swarm."""

# Set process name early on macOS (before any Qt imports)
# This ensures the menu bar shows the correct app name in development mode
import platform
import sys

if platform.system() == "Darwin":
    import setproctitle

    setproctitle.setproctitle("Word Swarm")

from wordswarm.ui.application import create_application


def main():
    """
    Run the Word Swarm application.
    """
    app = create_application()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
