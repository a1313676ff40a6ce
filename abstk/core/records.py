from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

class WidgetType(str, Enum):
    LABEL = "LABEL"
    BUTTON = "BUTTON"
    BUTTON_BOX = "BUTTON_BOX"
    COMBOBOX = "COMBOBOX"
    IMAGE = "IMAGE"
    TEXT_INPUT = "TEXT_INPUT"
    TEXTBOX = "TEXTBOX"
    CHECKLIST = "CHECKLIST"
    GRID = "GRID"
    RADIOLIST = "RADIOLIST"
    LIST = "LIST"

@dataclass
class WidgetRecord:
    """
    Bookkeeping entry for one widget added to a screen.

    `widget` is the outer toolkit widget packed into the window.
    `handles` holds the inner toolkit widgets that get/set address
    (e.g. "button", "buttons", "entry", "store").
    `changed_handler` is the id of the handler wired to the user callback
    on value-change signals, when there is one.
    """
    id: Any
    type: WidgetType
    widget: Any
    handles: dict[str, Any] = field(default_factory=dict)
    labels: list[str] | None = None  # COMBOBOX
    path: str | None = None  # IMAGE
    dimensions: tuple[int, int] | None = None  # IMAGE
    changed_handler: int | None = None  # TEXT_INPUT, TEXTBOX

class WidgetRegistry:
    """Ordered list of widget records; ids are not enforced to be unique."""

    def __init__(self):
        self._records: list[WidgetRecord] = []

    def add(self, record: WidgetRecord) -> WidgetRecord:
        self._records.append(record)
        return record

    def find(self, widget_id) -> WidgetRecord | None:
        for record in self._records:
            if record.id == widget_id:
                return record
        return None

    def find_all(self, widget_id) -> list[WidgetRecord]:
        return [record for record in self._records if record.id == widget_id]

    def __iter__(self) -> Iterator[WidgetRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
