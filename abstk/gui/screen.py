"""
Screen - a single window made of an ordered list of widgets.
"""

from __future__ import annotations

try:
    import gi
    gi.require_version('Gtk', '4.0')
    from gi.repository import Gtk
except (ImportError, ValueError) as e:
    raise RuntimeError("GTK4 or libadwaita not available") from e

from abstk.core.records import WidgetRecord, WidgetRegistry
from abstk.gui import app, logger, values, widgets
from abstk.gui.toolkit import run_modal

class Screen:
    """
    A single-window collection of widgets.

    Widgets are addressed later by the id given when adding them. Ids are
    not checked for uniqueness: getters read the first match, setters
    update every match.
    """

    def __init__(self, title: str, width: int | None = None, height: int | None = None):
        self.title = title
        self.width = width
        self.height = height
        self.widgets = WidgetRegistry()
        self.window = None

    def _add(self, record: WidgetRecord) -> WidgetRecord:
        logger.debug("screen %r: add %s %r", self.title, record.type.value, record.id)
        return self.widgets.add(record)

    def add_label(self, id, label):
        self._add(widgets.build_label(id, label))

    def add_button(self, id, label, tooltip=None, callback=None):
        """Callback receives (id, label) when clicked."""
        self._add(widgets.build_button(id, label, tooltip, callback))

    def create_button_box(self, id, labels, tooltip=None, callback=None):
        """Callback receives (id, label, index) for the clicked button."""
        self._add(widgets.build_button_box(id, labels, tooltip, callback))

    def create_combobox(self, id, labels, default_value=1, tooltip=None, callback=None):
        """
        Dropdown menu.

        Args:
            id: Widget id
            labels: Row labels
            default_value: 1-based index of the starting row
            tooltip: Optional tooltip
            callback: Receives (id, selected_label) on change
        """
        self._add(widgets.build_combobox(id, labels, default_value, tooltip, callback))

    def add_image(self, id, path, dimensions=None, tooltip=None):
        """
        Image from a file, scaled to `dimensions` (width, height) if given.

        Raises:
            GLib.Error: If the file cannot be loaded
        """
        self._add(widgets.build_image(id, path, dimensions, tooltip))

    def add_text_input(self, id, label=None, default_value=None, tooltip=None, callback=None,
                       visibility=True):
        """Single-line entry; callback receives (id, text) on change."""
        self._add(widgets.build_text_input(id, label, visibility, default_value, tooltip, callback))

    def add_password_input(self, id, label=None, default_value=None, tooltip=None, callback=None):
        self.add_text_input(id, label, default_value, tooltip, callback, visibility=False)

    def add_textbox(self, id, default_value=None, tooltip=None, callback=None):
        """Multi-line text field; callback receives (id, text) on change."""
        self._add(widgets.build_textbox(id, default_value, tooltip, callback))

    def create_checklist(self, id, items, default_value=None, tooltip=None, callback=None):
        """
        List of check buttons, laid out on a grid from four items on.

        Three call styles are accepted:

            scr.create_checklist("a", ["x", "y", "z"])
            scr.create_checklist("b", ["x", "y", "z"], [True, False, True])
            scr.create_checklist("c", [("x", False), ("y", True), ("z", True)])

        Callback receives (id, active, index) when a box is toggled.
        """
        self._add(widgets.build_checklist(id, items, default_value, tooltip, callback))

    def create_radiolist(self, id, items, default_value=None, tooltip=None, callback=None):
        """
        Grouped radio buttons.

        `items` is a list of labels (with `default_value` the 1-based index
        of the active one) or a list of (label, state) pairs. Callback
        receives (id, label, index) for the button that becomes active.
        """
        self._add(widgets.build_radiolist(id, items, default_value, tooltip, callback))

    def create_list(self, id, items, tooltip=None, callback=None):
        """
        Scrollable list of rows with a check column.

        `items` is a list of labels (all unchecked) or (state, label) pairs.
        Callback receives (id, active, index) when a row is toggled.
        """
        self._add(widgets.build_list(id, items, tooltip, callback))

    def show_message_box(self, id, message, buttons=None):
        """
        Show a modal message box and wait for an answer.

        Args:
            id: Id of the dialog (for logging only)
            message: Text of the message
            buttons: OK, CLOSE, CANCEL, YES_NO or OK_CANCEL (default: none)

        Returns:
            The response id ("ok", "close", "cancel", "yes", "no")
        """
        logger.debug("screen %r: message box %r", self.title, id)
        dialog = widgets.build_message_dialog(self.window, message, buttons)
        return run_modal(dialog)

    def set_enabled(self, id, enabled, index=None):
        for record in self.widgets.find_all(id):
            values.set_enabled(record, enabled, index)

    def set_value(self, id, value, index=None):
        records = self.widgets.find_all(id)
        if not records:
            logger.debug("screen %r: set_value on unknown id %r", self.title, id)
        for record in records:
            values.set_value(record, value, index)

    def get_value(self, id, index=None):
        record = self.widgets.find(id)
        if record is None:
            logger.debug("screen %r: get_value on unknown id %r", self.title, id)
            return None
        return values.get_value(record, index)

    def pack(self) -> Gtk.Box:
        """Stack every widget vertically, in insertion order."""
        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        for record in self.widgets:
            parent = record.widget.get_parent()
            if parent is not None:
                parent.remove(record.widget)
            vbox.append(record.widget)
        return vbox

    def _build_window(self, application) -> Gtk.ApplicationWindow:
        window = Gtk.ApplicationWindow(application=application, title=self.title)
        window.set_default_size(self.width or -1, self.height or -1)
        window.set_child(self.pack())
        self.window = window
        return window

    def run(self):
        """
        Show the screen as a single window and block until it is closed.

        Several screens meant to be shown in sequence belong in a Wizard.
        """
        logger.debug("screen %r: run", self.title)
        try:
            return app.run_window(self._build_window)
        finally:
            self.window = None
