import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for tests
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def gtk():
    """Gtk module, skipping the test when GTK4 or a display is unavailable."""
    pytest.importorskip("gi")
    try:
        from abstk.gui.toolkit import Gtk, Gdk
    except RuntimeError as exc:
        pytest.skip(str(exc))
    if Gdk.Display.get_default() is None:
        pytest.skip("no display available")
    return Gtk


@pytest.fixture
def screen(gtk):
    from abstk.gui.screen import Screen
    return Screen("Test screen", 320, 240)


@pytest.fixture
def clean_mode(monkeypatch):
    from abstk.core import config
    monkeypatch.delenv(config.MODE_ENV, raising=False)
    config.reset_mode()
    yield config
    config.reset_mode()


@pytest.fixture
def application(gtk):
    """A registered (started up, not running) AbsApplication."""
    from abstk.gui.app import AbsApplication
    app = AbsApplication(lambda a: None)
    app.register(None)
    yield app
    for window in app.get_windows():
        window.destroy()
