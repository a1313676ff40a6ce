"""
AbsTK - Declarative screens and wizards on top of GTK4
"""

__version__ = "0.1.0"

from abstk.core import config

# The GTK binding is imported lazily so that `abstk.core` stays usable
# without a display or PyGObject installed.

__all__ = [
    "core",
    "cli",
    "gui",
    "new_screen",
    "new_wizard",
    "set_mode",
]


def set_mode(mode=None):
    """Select the frontend mode (only "gui" is available)."""
    return config.set_mode(mode)


def new_screen(title, width=None, height=None):
    """Construct a Screen holding an ordered list of widgets."""
    config.get_mode()
    from abstk.gui.screen import Screen
    return Screen(title, width, height)


def new_wizard(title, width=None, height=None):
    """Construct a Wizard whose pages are Screens."""
    config.get_mode()
    from abstk.gui.wizard import Wizard
    return Wizard(title, width, height)
