"""
Wizard - screens presented as the pages of an assistant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

try:
    import gi
    gi.require_version('Gtk', '4.0')
    from gi.repository import Gtk
except (ImportError, ValueError) as e:
    raise RuntimeError("GTK4 or libadwaita not available") from e

from abstk.core import layout
from abstk.gui import app, logger

@dataclass
class WizardPage:
    id: Any
    title: str
    content: Gtk.Widget
    screen: Any
    complete: bool = True

class Wizard:
    """
    Multi-page assistant window.

    Every page is built from a Screen; pages are shown in the order they
    were added.
    """

    def __init__(self, title: str, width: int | None = None, height: int | None = None):
        self.title = title
        self.assistant = Gtk.Assistant(title=title)
        self.assistant.set_default_size(width or -1, height or -1)
        # Hidden rather than destroyed on close, so the wizard can run again
        self.assistant.set_hide_on_close(True)
        self.assistant.connect("cancel", self._on_finish)
        self.assistant.connect("close", self._on_finish)
        self.pages: list[WizardPage] = []
        self._close_handler = None

    def _on_finish(self, assistant):
        assistant.close()

    def add_page(self, id, screen, page_type=None):
        """
        Turn a screen into a wizard page.

        Args:
            id: Page id
            screen: Screen whose widgets fill the page
            page_type: INTRO, CONTENT, CONFIRM, SUMMARY or PROGRESS;
                anything else keeps the assistant's default
        """
        page = WizardPage(id=id, title=screen.title, content=screen.pack(), screen=screen)
        self.pages.append(page)

        self.assistant.append_page(page.content)
        self.assistant.set_page_title(page.content, page.title)
        self.assistant.set_page_complete(page.content, page.complete)

        name = layout.page_type(page_type)
        if name:
            self.assistant.set_page_type(page.content, getattr(Gtk.AssistantPageType, name))

        logger.debug("wizard %r: add page %r (%s)", self.title, id, name or "default")
        return page

    def get_page(self, id) -> WizardPage | None:
        for page in self.pages:
            if page.id == id:
                return page
        return None

    def _build_window(self, application) -> Gtk.Assistant:
        def on_close_request(_assistant):
            # A hidden window still keeps the application alive
            application.quit()
            return False

        self.assistant.set_application(application)
        self._close_handler = self.assistant.connect("close-request", on_close_request)
        if self.pages:
            self.assistant.set_current_page(0)
        return self.assistant

    def run(self):
        """
        Show the wizard and block until it is closed.

        Call it once every page has been added. A closed wizard can be run
        again; it restarts on the first page.
        """
        logger.debug("wizard %r: run with %d page(s)", self.title, len(self.pages))
        try:
            return app.run_window(self._build_window)
        finally:
            if self._close_handler is not None:
                self.assistant.disconnect(self._close_handler)
                self._close_handler = None
            self.assistant.set_application(None)
