"""
Widget builders.

Each builder constructs the GTK widgets for one widget type, wires the
optional callback and returns the WidgetRecord a Screen stores.
Indexes handed to callbacks are 1-based.
"""

from __future__ import annotations

try:
    import gi
    gi.require_version('Gtk', '4.0')
    gi.require_version('Adw', '1')
    from gi.repository import Gtk, Adw
except (ImportError, ValueError) as e:
    raise RuntimeError("GTK4 or libadwaita not available") from e

from abstk.core import layout
from abstk.core.records import WidgetRecord, WidgetType
from abstk.gui.toolkit import load_texture, make_box, set_border

VERTICAL = Gtk.Orientation.VERTICAL
HORIZONTAL = Gtk.Orientation.HORIZONTAL

def build_label(widget_id, label) -> WidgetRecord:
    label_widget = Gtk.Label(label=label)
    label_widget.set_halign(Gtk.Align.START)
    return WidgetRecord(id=widget_id, type=WidgetType.LABEL, widget=label_widget)

def build_button(widget_id, label, tooltip=None, callback=None) -> WidgetRecord:
    button = Gtk.Button(label=label)
    button.set_tooltip_text(tooltip)
    if callback:
        button.connect("clicked", lambda b: callback(widget_id, b.get_label()))

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.BUTTON,
        widget=make_box(HORIZONTAL, button, border=10),
        handles={"button": button},
    )

def build_button_box(widget_id, labels, tooltip=None, callback=None) -> WidgetRecord:
    bbox = make_box(HORIZONTAL, border=5, spacing=20)
    bbox.set_halign(Gtk.Align.START)

    buttons = []
    for i, label in enumerate(labels, start=1):
        button = Gtk.Button(label=label)
        button.set_tooltip_text(tooltip)
        if callback:
            button.connect("clicked", lambda b, i=i: callback(widget_id, b.get_label(), i))
        bbox.append(button)
        buttons.append(button)

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.BUTTON_BOX,
        widget=make_box(VERTICAL, bbox, border=10),
        handles={"bbox": bbox, "buttons": buttons},
    )

def build_combobox(widget_id, labels, default_value=None, tooltip=None, callback=None) -> WidgetRecord:
    labels = [str(label) for label in labels]
    dropdown = Gtk.DropDown.new_from_strings(labels)
    dropdown.set_tooltip_text(tooltip)
    if labels:
        dropdown.set_selected((default_value or 1) - 1)

    if callback:
        def on_selected(dd, _pspec):
            selected = dd.get_selected()
            if selected < len(labels):
                callback(widget_id, labels[selected])
        dropdown.connect("notify::selected", on_selected)

    inner = make_box(VERTICAL, dropdown, border=10)
    return WidgetRecord(
        id=widget_id,
        type=WidgetType.COMBOBOX,
        widget=make_box(VERTICAL, inner, spacing=10),
        handles={"combobox": dropdown},
        labels=labels,
    )

def build_image(widget_id, path, dimensions=None, tooltip=None) -> WidgetRecord:
    picture = Gtk.Picture.new_for_paintable(load_texture(path, dimensions))
    picture.set_can_shrink(False)
    picture.set_tooltip_text(tooltip)

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.IMAGE,
        widget=make_box(HORIZONTAL, picture),
        handles={"image": picture},
        path=str(path),
        dimensions=dimensions,
    )

def build_text_input(widget_id, label=None, visibility=True, default_value=None,
                     tooltip=None, callback=None) -> WidgetRecord:
    entry = Gtk.Entry(hexpand=True)
    entry.set_tooltip_text(tooltip)
    entry.set_text(default_value or "")
    entry.set_visibility(visibility)
    handler = None
    if callback:
        handler = entry.connect("changed", lambda e: callback(widget_id, e.get_text()))

    if label is None:
        widget = make_box(VERTICAL, entry, border=5)
    else:
        widget = make_box(HORIZONTAL, Gtk.Label(label=label), entry, border=5, spacing=10)

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.TEXT_INPUT,
        widget=widget,
        handles={"entry": entry},
        changed_handler=handler,
    )

def textbuffer_text(buffer: Gtk.TextBuffer) -> str:
    return buffer.get_text(buffer.get_start_iter(), buffer.get_end_iter(), True)

def build_textbox(widget_id, default_value=None, tooltip=None, callback=None) -> WidgetRecord:
    textview = Gtk.TextView()
    textview.set_tooltip_text(tooltip)
    buffer = textview.get_buffer()
    buffer.set_text(default_value or "")
    handler = None
    if callback:
        handler = buffer.connect("changed", lambda b: callback(widget_id, textbuffer_text(b)))

    scrolled_window = Gtk.ScrolledWindow()
    scrolled_window.set_propagate_natural_height(True)
    scrolled_window.set_child(textview)

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.TEXTBOX,
        widget=make_box(VERTICAL, scrolled_window, border=10),
        handles={"textview": textview},
        changed_handler=handler,
    )

def _check_buttons(widget_id, entries, callback) -> list[Gtk.CheckButton]:
    buttons = []
    for i, (label, state) in enumerate(entries, start=1):
        checkbutton = Gtk.CheckButton(label=label)
        checkbutton.set_active(state)
        if callback:
            checkbutton.connect("toggled", lambda b, i=i: callback(widget_id, b.get_active(), i))
        buttons.append(checkbutton)
    return buttons

def build_checklist(widget_id, items, default_value=None, tooltip=None, callback=None) -> WidgetRecord:
    entries = layout.checklist_entries(items, default_value)
    buttons = _check_buttons(widget_id, entries, callback)

    if not layout.uses_grid(len(entries)):
        widget = make_box(VERTICAL, *buttons, border=10)
        widget.set_tooltip_text(tooltip)
        return WidgetRecord(
            id=widget_id,
            type=WidgetType.CHECKLIST,
            widget=widget,
            handles={"buttons": buttons},
        )

    grid = Gtk.Grid()
    for i, checkbutton in enumerate(buttons, start=1):
        column, row = layout.grid_position(i)
        grid.attach(checkbutton, column, row, 1, 1)

    frame = Gtk.Frame()
    frame.set_child(make_box(HORIZONTAL, grid, border=10))
    frame.set_tooltip_text(tooltip)
    return WidgetRecord(
        id=widget_id,
        type=WidgetType.GRID,
        widget=frame,
        handles={"grid": grid, "buttons": buttons},
    )

def build_radiolist(widget_id, items, default_value=None, tooltip=None, callback=None) -> WidgetRecord:
    entries = layout.radiolist_entries(items, default_value)
    widget = make_box(VERTICAL, border=10)
    widget.set_tooltip_text(tooltip)

    buttons = []
    first = None
    for label, state in entries:
        radiobutton = Gtk.CheckButton(label=label)
        if first is None:
            first = radiobutton
        else:
            radiobutton.set_group(first)
        radiobutton.set_active(state)
        widget.append(radiobutton)
        buttons.append(radiobutton)

    # A radio group always has one active button
    if buttons and not any(b.get_active() for b in buttons):
        buttons[0].set_active(True)

    if callback:
        for i, radiobutton in enumerate(buttons, start=1):
            def on_toggled(b, i=i):
                # Only report the button that became active
                if b.get_active():
                    callback(widget_id, b.get_label(), i)
            radiobutton.connect("toggled", on_toggled)

    return WidgetRecord(
        id=widget_id,
        type=WidgetType.RADIOLIST,
        widget=widget,
        handles={"buttons": buttons},
    )

LIST_ACTIVE = 0
LIST_LABEL = 1

def build_list(widget_id, items, tooltip=None, callback=None) -> WidgetRecord:
    store = Gtk.ListStore(bool, str)
    for state, label in layout.list_rows(items):
        store.append([state, label])

    toggle = Gtk.CellRendererToggle()
    check_column = Gtk.TreeViewColumn("", toggle, active=LIST_ACTIVE)
    check_column.set_sizing(Gtk.TreeViewColumnSizing.FIXED)
    check_column.set_fixed_width(40)

    label_column = Gtk.TreeViewColumn("", Gtk.CellRendererText(), text=LIST_LABEL)
    label_column.set_sort_column_id(LIST_LABEL)

    view = Gtk.TreeView(model=store)
    view.append_column(check_column)
    view.append_column(label_column)

    def on_toggled(_renderer, path_str):
        row = store[path_str]
        row[LIST_ACTIVE] = not row[LIST_ACTIVE]
        if callback:
            callback(widget_id, row[LIST_ACTIVE], int(path_str) + 1)

    toggle.connect("toggled", on_toggled)

    scrolled_window = Gtk.ScrolledWindow()
    scrolled_window.set_has_frame(True)
    scrolled_window.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
    scrolled_window.set_hexpand(True)
    scrolled_window.set_propagate_natural_height(True)
    scrolled_window.set_child(view)

    frame = Gtk.Frame()
    frame.set_child(scrolled_window)
    frame.set_tooltip_text(tooltip)
    return WidgetRecord(
        id=widget_id,
        type=WidgetType.LIST,
        widget=frame,
        handles={"view": view, "store": store, "toggle": toggle},
    )

def build_message_dialog(parent, message, buttons=None) -> Adw.MessageDialog:
    dialog = Adw.MessageDialog.new(parent, None, message)
    dialog.set_modal(True)
    dialog.set_destroy_with_parent(True)
    for response_id, label in layout.message_responses(buttons):
        dialog.add_response(response_id, label)
    return dialog
