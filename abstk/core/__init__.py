"""
Toolkit-agnostic helpers for abstk.

Nothing in this package imports gi, so it can be used (and tested)
without a display.
"""

from abstk.core import (
    config,
    layout,
    records,
)

__all__ = [
    "config",
    "layout",
    "records",
]
