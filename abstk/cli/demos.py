"""
Sample screens exercising every widget type.
"""

from __future__ import annotations

import abstk

def _print_callback(*args):
    print("callback:", *args)

def label_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Label")
    scr.add_label("hello", "Hello, World!")
    scr.add_label("second", "A second, left-aligned label")
    scr.run()

def buttons_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Buttons")

    def on_toggle(id, label, index):
        enabled = label == "Enable"
        scr.set_enabled("bbox", enabled, 3)
        _print_callback(id, label, index)

    scr.add_button("button", "Click me", "A single button", _print_callback)
    scr.create_button_box("bbox", ["Enable", "Disable", "Target"], "A button box", on_toggle)
    scr.run()

def combobox_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Combobox")
    scr.create_combobox("fruit", ["Apple", "Banana", "Cherry"], 2, "Pick a fruit", _print_callback)
    scr.run()

def image_demo(image=None, **_):
    if image is None:
        raise ValueError("The image demo needs --image PATH")
    scr = abstk.new_screen("AbsTK Demo - Image")
    scr.add_image("original", image, None, "Original size")
    scr.add_image("thumbnail", image, (64, 64), "Scaled to 64x64")
    scr.run()

def text_input_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Text Input")
    scr.add_text_input("username", "Username", callback=_print_callback)
    scr.add_password_input("password", "Password", callback=_print_callback)
    scr.add_text_input("plain")
    scr.run()

def textbox_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - TextBox", 400, 300)
    scr.add_textbox("notes", "Pre-written text", "Write here", _print_callback)
    scr.add_textbox("empty")
    scr.run()

def checklist_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Checklist")
    scr.create_checklist("style1", ["a", "b", "c"], None, "Labels only", _print_callback)
    scr.create_checklist("style2", ["7", "8", "9"], [True, False, True], "Labels and states", _print_callback)
    scr.create_checklist("style3", [("z", False), ("x", True), ("c", True)], None, "Pairs", _print_callback)
    scr.create_checklist("grid", [str(n) for n in range(1, 8)], None, "Seven items on a grid", _print_callback)
    scr.run()

def radiolist_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Radiolist")
    scr.create_radiolist("style1", ["x", "y", "z"], None, "Labels only", _print_callback)
    scr.create_radiolist("style2", ["a", "s", "d"], 3, "Third one active", _print_callback)
    scr.create_radiolist("style3", [("q", False), ("w", True), ("e", False)], None, "Pairs", _print_callback)
    scr.run()

def list_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - List", 300, 400)
    rows = [(n == 2, f"Item{n}") for n in range(1, 10)]
    scr.create_list("style1", rows, "Explicit states", _print_callback)
    scr.create_list("style2", ["Item10", "Item11", "Item12"], "Labels only", _print_callback)
    scr.run()

def message_demo(**_):
    scr = abstk.new_screen("AbsTK Demo - Message Box")

    def ask(id, label):
        answer = scr.show_message_box("question", "Do you like it?", "YES_NO")
        scr.set_value("answer", f"Answer: {answer}")

    scr.add_button("ask", "Ask a question", None, ask)
    scr.add_label("answer", "Answer: (none)")
    scr.run()

def wizard_demo(**_):
    wizard = abstk.new_wizard("AbsTK Demo - Wizard", 500, 350)

    intro = abstk.new_screen("Welcome")
    intro.add_label("intro", "This wizard shows a few screens in sequence.")
    wizard.add_page("intro", intro, "INTRO")

    details = abstk.new_screen("Details")
    details.add_text_input("name", "Name")
    details.create_combobox("size", ["Small", "Medium", "Large"], 2)
    wizard.add_page("details", details)

    options = abstk.new_screen("Options")
    options.create_checklist("options", ["Fast", "Safe", "Quiet", "Verbose"], [True, True])
    wizard.add_page("options", options)

    done = abstk.new_screen("Confirm")
    done.add_label("done", "Apply the settings?")
    wizard.add_page("confirm", done, "CONFIRM")

    wizard.run()

DEMOS = {
    "label": label_demo,
    "buttons": buttons_demo,
    "combobox": combobox_demo,
    "image": image_demo,
    "text_input": text_input_demo,
    "textbox": textbox_demo,
    "checklist": checklist_demo,
    "radiolist": radiolist_demo,
    "list": list_demo,
    "message": message_demo,
    "wizard": wizard_demo,
}
