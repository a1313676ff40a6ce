"""
GTK4/libadwaita binding for abstk.

Screens and wizards build real GTK widgets as soon as widgets are added;
nothing is shown until `run()` is called.
Set ABSTK_GUI_DEBUG=1 to print debug records about widget bookkeeping.
"""

import logging
import os

logger = logging.getLogger("abstk.gui")
if os.environ.get("ABSTK_GUI_DEBUG") and not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

__all__ = ["app", "screen", "toolkit", "values", "widgets", "wizard"]
