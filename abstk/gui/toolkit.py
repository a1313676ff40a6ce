"""
Thin helpers around GTK4 that the widget builders share.
"""

from __future__ import annotations

try:
    import gi
    gi.require_version('Gtk', '4.0')
    gi.require_version('Adw', '1')
    gi.require_version('Gdk', '4.0')
    gi.require_version('GdkPixbuf', '2.0')
    from gi.repository import Gtk, Adw, Gdk, GdkPixbuf, GLib
except (ImportError, ValueError) as e:
    raise RuntimeError("GTK4 or libadwaita not available") from e

from abstk.gui import logger

# Message dialogs are libadwaita widgets; they need Adw initialised even
# when no Adw.Application is running yet. Adw.init() exits the process
# when no display can be opened.
if Gdk.Display.get_default() is not None:
    Adw.init()

def set_border(widget: Gtk.Widget, width: int) -> Gtk.Widget:
    """Apply the same margin on all four sides (GTK4 has no border-width)."""
    widget.set_margin_top(width)
    widget.set_margin_bottom(width)
    widget.set_margin_start(width)
    widget.set_margin_end(width)
    return widget

def make_box(orientation: Gtk.Orientation, *children, border: int = 0, spacing: int = 0) -> Gtk.Box:
    box = Gtk.Box(orientation=orientation, spacing=spacing)
    set_border(box, border)
    for child in children:
        box.append(child)
    return box

def load_texture(path, dimensions=None) -> Gdk.Texture:
    """
    Load an image file into a texture.

    Args:
        path: Image file path
        dimensions: Optional (width, height) to scale the image to

    Raises:
        GLib.Error: If the file is missing or not a readable image
    """
    pixbuf = GdkPixbuf.Pixbuf.new_from_file(str(path))
    if dimensions:
        width, height = dimensions
        pixbuf = pixbuf.scale_simple(int(width), int(height), GdkPixbuf.InterpType.BILINEAR)
    return Gdk.Texture.new_for_pixbuf(pixbuf)

def run_modal(dialog: Adw.MessageDialog) -> str | None:
    """
    Present a dialog and block until it is answered.

    Spins a nested main loop, so it works both before `run()` and from
    inside a widget callback.

    Returns:
        The response id chosen by the user
    """
    loop = GLib.MainLoop()
    result: dict[str, str] = {}

    def on_response(_dialog, response):
        result["response"] = response
        if loop.is_running():
            loop.quit()

    dialog.connect("response", on_response)
    dialog.present()
    loop.run()

    logger.debug("dialog answered with %r", result.get("response"))
    return result.get("response")
