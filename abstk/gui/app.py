"""
Application runner for screens and wizards.
"""

import sys

try:
    import gi
    gi.require_version('Gtk', '4.0')
    gi.require_version('Adw', '1')
    gi.require_version('Gdk', '4.0')
    from gi.repository import Gtk, Adw, Gio, Gdk
except (ImportError, ValueError) as e:
    raise RuntimeError("GTK4 or libadwaita not available") from e

from abstk.core import config
from abstk.gui import logger

class AbsApplication(Adw.Application):
    """
    Application hosting a single top-level window.

    Used to manage:
    - Application lifecycle (quits once the window is closed)
    - Optional user CSS from ~/.config/abstk/style.css
    - Window creation, delegated to `build_window(app)`
    """

    def __init__(self, build_window):
        super().__init__(
            application_id=config.APPLICATION_ID,
            flags=Gio.ApplicationFlags.NON_UNIQUE
        )

        self._build_window = build_window
        self._window = None

    def do_startup(self):
        """Called once at application startup"""
        Adw.Application.do_startup(self)
        self._load_css()

    def do_activate(self):
        """Called when the application is activated (launched)"""
        if self._window:
            self._window.present()
            return

        self._window = self._build_window(self)
        self._window.present()

    def _load_css(self):
        """Load custom CSS styles for the application"""
        css_path = config.STYLE_FILE

        if not css_path.exists():
            return

        logger.debug("loading stylesheet %s", css_path)
        css_provider = Gtk.CssProvider()
        css_provider.load_from_path(str(css_path))

        Gtk.StyleContext.add_provider_for_display(
            display=Gdk.Display.get_default(),
            provider=css_provider,
            priority=Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )

def run_window(build_window) -> int:
    """Run an application around the window returned by `build_window(app)`."""
    app = AbsApplication(build_window)
    # Script arguments belong to the caller, not to GApplication
    return app.run(sys.argv[:1])
