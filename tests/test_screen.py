from __future__ import annotations

import pytest

from abstk.core.records import WidgetType


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


def record_of(screen, widget_id):
    return screen.widgets.find(widget_id)


def test_label(screen, gtk):
    screen.add_label("title", "Hello")
    record = record_of(screen, "title")
    assert record.type is WidgetType.LABEL
    assert isinstance(record.widget, gtk.Label)
    assert record.widget.get_halign() == gtk.Align.START
    assert screen.get_value("title") == "Hello"

    screen.set_value("title", "Bye")
    assert screen.get_value("title") == "Bye"


def test_button_click_calls_back_with_label(screen):
    cb = Recorder()
    screen.add_button("ok", "Press", "tip", cb)
    button = record_of(screen, "ok").handles["button"]
    assert button.get_tooltip_text() == "tip"

    button.emit("clicked")
    assert cb.calls == [("ok", "Press")]

    screen.set_value("ok", "Again")
    assert screen.get_value("ok") == "Again"


def test_button_box(screen):
    cb = Recorder()
    screen.create_button_box("bbox", ["One", "Two", "Three"], None, cb)
    buttons = record_of(screen, "bbox").handles["buttons"]

    buttons[1].emit("clicked")
    assert cb.calls == [("bbox", "Two", 2)]

    assert screen.get_value("bbox", 3) == "Three"
    screen.set_value("bbox", "Trois", 3)
    assert buttons[2].get_label() == "Trois"


def test_button_box_set_enabled_targets_one_button(screen):
    screen.create_button_box("bbox", ["a", "b", "c"])
    screen.set_enabled("bbox", False, 2)
    buttons = record_of(screen, "bbox").handles["buttons"]
    assert [b.get_sensitive() for b in buttons] == [True, False, True]


def test_button_box_index_out_of_range(screen):
    screen.create_button_box("bbox", ["a"])
    with pytest.raises(IndexError):
        screen.get_value("bbox", 2)


def test_set_enabled_whole_widget(screen):
    screen.add_text_input("name")
    screen.set_enabled("name", False)
    assert not record_of(screen, "name").widget.get_sensitive()


def test_combobox(screen):
    cb = Recorder()
    screen.create_combobox("fruit", ["Apple", "Banana", "Cherry"], 2, None, cb)
    record = record_of(screen, "fruit")
    assert record.labels == ["Apple", "Banana", "Cherry"]
    assert screen.get_value("fruit") == "Banana"
    assert cb.calls == []

    screen.set_value("fruit", "Cherry")
    assert screen.get_value("fruit") == "Cherry"
    assert cb.calls == [("fruit", "Cherry")]

    screen.set_value("fruit", "Durian")
    assert screen.get_value("fruit") == "Cherry"


def test_combobox_defaults_to_first_row(screen):
    screen.create_combobox("size", ["S", "M"])
    assert screen.get_value("size") == "S"


@pytest.fixture
def image_file(tmp_path, gtk):
    from gi.repository import GdkPixbuf
    path = tmp_path / "pixel.png"
    pixbuf = GdkPixbuf.Pixbuf.new(GdkPixbuf.Colorspace.RGB, False, 8, 10, 8)
    pixbuf.fill(0x3584E4FF)
    pixbuf.savev(str(path), "png", [], [])
    return path


def test_image(screen, image_file):
    screen.add_image("img", image_file, None, "picture")
    record = record_of(screen, "img")
    assert record.type is WidgetType.IMAGE
    assert screen.get_value("img") == str(image_file)
    assert record.handles["image"].get_paintable().get_intrinsic_width() == 10


def test_image_scaled(screen, image_file):
    screen.add_image("img", image_file, (4, 3))
    record = record_of(screen, "img")
    assert record.dimensions == (4, 3)
    paintable = record.handles["image"].get_paintable()
    assert (paintable.get_intrinsic_width(), paintable.get_intrinsic_height()) == (4, 3)


def test_image_set_value_keeps_scale(screen, image_file):
    screen.add_image("img", image_file, (4, 3))
    screen.set_value("img", str(image_file))
    paintable = record_of(screen, "img").handles["image"].get_paintable()
    assert paintable.get_intrinsic_width() == 4


def test_image_set_value_updates_path(screen, image_file, tmp_path):
    other = tmp_path / "other.png"
    other.write_bytes(image_file.read_bytes())
    screen.add_image("img", image_file)
    screen.set_value("img", str(other))
    assert screen.get_value("img") == str(other)


def test_image_missing_file_raises(screen, tmp_path):
    from gi.repository import GLib
    with pytest.raises(GLib.Error):
        screen.add_image("img", tmp_path / "missing.png")
    assert len(screen.widgets) == 0


def test_text_input(screen, gtk):
    cb = Recorder()
    screen.add_text_input("user", "Username", "bob", None, cb)
    record = record_of(screen, "user")
    assert record.widget.get_orientation() == gtk.Orientation.HORIZONTAL
    assert screen.get_value("user") == "bob"
    assert cb.calls == []

    screen.set_value("user", "alice")
    assert screen.get_value("user") == "alice"
    assert cb.calls == [("user", "alice")]


def test_text_input_without_label(screen, gtk):
    screen.add_text_input("plain")
    record = record_of(screen, "plain")
    assert record.widget.get_orientation() == gtk.Orientation.VERTICAL
    assert screen.get_value("plain") == ""


def test_password_input_hides_text(screen):
    screen.add_password_input("pw", "Password")
    assert not record_of(screen, "pw").handles["entry"].get_visibility()


def test_textbox(screen):
    cb = Recorder()
    screen.add_textbox("notes", "first line", None, cb)
    assert screen.get_value("notes") == "first line"
    assert cb.calls == []

    screen.set_value("notes", "one\ntwo")
    assert screen.get_value("notes") == "one\ntwo"
    assert cb.calls == [("notes", "one\ntwo")]


def test_textbox_typing_still_reports_changes(screen):
    cb = Recorder()
    screen.add_textbox("notes", "ab", None, cb)
    buffer = record_of(screen, "notes").handles["textview"].get_buffer()

    buffer.insert(buffer.get_end_iter(), "c")
    assert cb.calls == [("notes", "abc")]


def test_textbox_without_callback(screen):
    screen.add_textbox("notes")
    assert record_of(screen, "notes").changed_handler is None
    screen.set_value("notes", "text")
    assert screen.get_value("notes") == "text"


def test_small_checklist_is_a_box(screen, gtk):
    cb = Recorder()
    screen.create_checklist("chk", ["a", "b", "c"], [False, True], "tip", cb)
    record = record_of(screen, "chk")
    assert record.type is WidgetType.CHECKLIST
    assert isinstance(record.widget, gtk.Box)
    assert screen.get_value("chk", 2) == ("b", True)
    assert screen.get_value("chk", 3) == ("c", False)

    screen.set_value("chk", True, 1)
    assert screen.get_value("chk", 1) == ("a", True)
    assert cb.calls == [("chk", True, 1)]


def test_large_checklist_uses_grid(screen, gtk):
    screen.create_checklist("grid", [("1", False), ("2", False), ("3", False), ("4", True), ("5", False)])
    record = record_of(screen, "grid")
    assert record.type is WidgetType.GRID
    assert isinstance(record.widget, gtk.Frame)

    grid = record.handles["grid"]
    buttons = record.handles["buttons"]
    assert grid.get_child_at(1, 0) is buttons[3]
    assert grid.get_child_at(0, 2) is buttons[2]

    assert screen.get_value("grid", 4) == ("4", True)
    screen.set_value("grid", True, 5)
    assert buttons[4].get_active()


def test_radiolist(screen):
    cb = Recorder()
    screen.create_radiolist("radio", ["a", "s", "d"], 3, None, cb)
    assert screen.get_value("radio") == "d"

    screen.set_value("radio", True, 1)
    assert screen.get_value("radio") == "a"
    assert cb.calls == [("radio", "a", 1)]


def test_radiolist_pairs(screen):
    screen.create_radiolist("radio", [("q", False), ("w", True), ("e", False)])
    assert screen.get_value("radio") == "w"


def test_radiolist_without_default_selects_first(screen):
    screen.create_radiolist("radio", ["x", "y", "z"])
    assert screen.get_value("radio") == "x"


def test_radiolist_pairs_without_active_selects_first(screen):
    screen.create_radiolist("radio", [("q", False), ("w", False)])
    assert screen.get_value("radio") == "q"


def test_radiolist_cannot_switch_off_active_button(screen):
    cb = Recorder()
    screen.create_radiolist("radio", ["a", "s", "d"], 2, None, cb)

    screen.set_value("radio", False, 2)
    assert screen.get_value("radio") == "s"

    screen.set_value("radio", False, 3)
    assert screen.get_value("radio") == "s"
    assert cb.calls == []


def test_list(screen, gtk):
    cb = Recorder()
    screen.create_list("lst", [(False, "Item1"), (True, "Item2")], "tip", cb)
    record = record_of(screen, "lst")
    assert isinstance(record.widget, gtk.Frame)
    assert screen.get_value("lst", 2) == ("Item2", True)

    record.handles["toggle"].emit("toggled", "0")
    assert screen.get_value("lst", 1) == ("Item1", True)
    assert cb.calls == [("lst", True, 1)]

    screen.set_value("lst", False, 2)
    assert screen.get_value("lst", 2) == ("Item2", False)


def test_list_from_labels(screen):
    screen.create_list("lst", ["Item10", "Item11"])
    assert screen.get_value("lst", 1) == ("Item10", False)


def test_unknown_id(screen):
    screen.add_label("a", "x")
    assert screen.get_value("missing") is None
    screen.set_value("missing", "y")
    screen.set_enabled("missing", False)
    assert screen.get_value("a") == "x"


def test_duplicate_ids(screen):
    screen.add_label("dup", "first")
    screen.add_label("dup", "second")
    assert screen.get_value("dup") == "first"

    screen.set_value("dup", "both")
    assert [r.widget.get_text() for r in screen.widgets.find_all("dup")] == ["both", "both"]


def test_pack_keeps_insertion_order(screen):
    screen.add_label("one", "1")
    screen.add_button("two", "2")
    screen.add_textbox("three")

    vbox = screen.pack()
    children = []
    child = vbox.get_first_child()
    while child:
        children.append(child)
        child = child.get_next_sibling()
    assert children == [r.widget for r in screen.widgets]

    # Packing again moves the widgets to the new box
    again = screen.pack()
    assert record_of(screen, "one").widget.get_parent() is again


def test_show_message_box_returns_response(screen, monkeypatch):
    from gi.repository import GLib
    from abstk.gui import widgets

    build = widgets.build_message_dialog

    def answering_dialog(parent, message, buttons=None):
        dialog = build(parent, message, buttons)
        assert dialog.has_response("yes")

        def answer():
            dialog.response("yes")
            return GLib.SOURCE_REMOVE

        GLib.idle_add(answer)
        return dialog

    monkeypatch.setattr(widgets, "build_message_dialog", answering_dialog)
    assert screen.show_message_box("q", "Continue?", "YES_NO") == "yes"
