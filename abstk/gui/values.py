"""
Value access for widget records, dispatched on the record's type tag.
"""

from __future__ import annotations

from abstk.core import layout
from abstk.core.records import WidgetRecord, WidgetType
from abstk.gui.toolkit import load_texture
from abstk.gui.widgets import LIST_ACTIVE, LIST_LABEL, textbuffer_text

def _position(index, count: int) -> int:
    """Convert a 1-based child index to a list position."""
    if index is None or not 1 <= index <= count:
        raise IndexError(f"Child index {index!r} out of range 1..{count}")
    return index - 1

def _child(record: WidgetRecord, index):
    buttons = record.handles["buttons"]
    return buttons[_position(index, len(buttons))]

def _row(record: WidgetRecord, index):
    store = record.handles["store"]
    return store[_position(index, len(store))]

# ---- getters ----

def _get_label(record, index):
    return record.widget.get_text()

def _get_button(record, index):
    return record.handles["button"].get_label()

def _get_button_box(record, index):
    return _child(record, index).get_label()

def _get_combobox(record, index):
    selected = record.handles["combobox"].get_selected()
    if selected < len(record.labels):
        return record.labels[selected]
    return None

def _get_image(record, index):
    return record.path

def _get_text_input(record, index):
    return record.handles["entry"].get_text()

def _get_textbox(record, index):
    return textbuffer_text(record.handles["textview"].get_buffer())

def _get_check(record, index):
    button = _child(record, index)
    return button.get_label(), button.get_active()

def _get_radiolist(record, index):
    for button in record.handles["buttons"]:
        if button.get_active():
            return button.get_label()
    return None

def _get_list(record, index):
    row = _row(record, index)
    return row[LIST_LABEL], row[LIST_ACTIVE]

GETTERS = {
    WidgetType.LABEL: _get_label,
    WidgetType.BUTTON: _get_button,
    WidgetType.BUTTON_BOX: _get_button_box,
    WidgetType.COMBOBOX: _get_combobox,
    WidgetType.IMAGE: _get_image,
    WidgetType.TEXT_INPUT: _get_text_input,
    WidgetType.TEXTBOX: _get_textbox,
    WidgetType.CHECKLIST: _get_check,
    WidgetType.GRID: _get_check,
    WidgetType.RADIOLIST: _get_radiolist,
    WidgetType.LIST: _get_list,
}

# ---- setters ----

def _set_label(record, value, index):
    record.widget.set_text(value)

def _set_button(record, value, index):
    record.handles["button"].set_label(value)

def _set_button_box(record, value, index):
    _child(record, index).set_label(value)

def _set_combobox(record, value, index):
    # Values that match no label leave the selection untouched
    i = layout.combobox_index(record.labels, value)
    if i is not None:
        record.handles["combobox"].set_selected(i)

def _set_image(record, value, index):
    texture = load_texture(value, record.dimensions)
    record.handles["image"].set_paintable(texture)
    record.path = str(value)

def _replace_text(record, emitter, value):
    """
    Set the text of an entry or text buffer, reporting it once.

    Replacing text is a delete followed by an insert, each of which emits
    "changed"; the callback only sees the final text.
    """
    if record.changed_handler is None:
        emitter.set_text(value)
        return

    emitter.handler_block(record.changed_handler)
    try:
        emitter.set_text(value)
    finally:
        emitter.handler_unblock(record.changed_handler)
    emitter.emit("changed")

def _set_text_input(record, value, index):
    _replace_text(record, record.handles["entry"], value)

def _set_textbox(record, value, index):
    _replace_text(record, record.handles["textview"].get_buffer(), value)

def _set_check(record, value, index):
    _child(record, index).set_active(bool(value))

def _set_radio(record, value, index):
    # Switching the active radio button off is ignored; the group keeps
    # one button active until another one is selected
    button = _child(record, index)
    if value:
        button.set_active(True)

def _set_list(record, value, index):
    _row(record, index)[LIST_ACTIVE] = bool(value)

SETTERS = {
    WidgetType.LABEL: _set_label,
    WidgetType.BUTTON: _set_button,
    WidgetType.BUTTON_BOX: _set_button_box,
    WidgetType.COMBOBOX: _set_combobox,
    WidgetType.IMAGE: _set_image,
    WidgetType.TEXT_INPUT: _set_text_input,
    WidgetType.TEXTBOX: _set_textbox,
    WidgetType.CHECKLIST: _set_check,
    WidgetType.GRID: _set_check,
    WidgetType.RADIOLIST: _set_radio,
    WidgetType.LIST: _set_list,
}

def get_value(record: WidgetRecord, index=None):
    return GETTERS[record.type](record, index)

def set_value(record: WidgetRecord, value, index=None) -> None:
    SETTERS[record.type](record, value, index)

def set_enabled(record: WidgetRecord, enabled: bool, index=None) -> None:
    if record.type is WidgetType.BUTTON_BOX:
        _child(record, index).set_sensitive(enabled)
    else:
        record.widget.set_sensitive(enabled)
