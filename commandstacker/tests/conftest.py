import sys
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture
def qapp():
    """
    Provides a Qt application instance so QObject signals behave as in the editor.
    """
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def make_command():
    """Returns a factory for mock commands with ``run`` and ``undo``."""
    def factory(name="command"):
        return MagicMock(name=name)
    return factory
