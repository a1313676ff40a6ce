from __future__ import annotations

from typing import Sequence

# Checklists with this many items or more are laid out on a grid
GRID_THRESHOLD = 4
GRID_ROWS = 3

PAGE_TYPES = ("INTRO", "CONTENT", "CONFIRM", "SUMMARY", "PROGRESS")

MESSAGE_BUTTONS: dict[str, tuple[tuple[str, str], ...]] = {
    "OK": (("ok", "OK"),),
    "CLOSE": (("close", "Close"),),
    "CANCEL": (("cancel", "Cancel"),),
    "YES_NO": (("no", "No"), ("yes", "Yes")),
    "OK_CANCEL": (("cancel", "Cancel"), ("ok", "OK")),
}

def uses_grid(count: int) -> bool:
    return count >= GRID_THRESHOLD

def grid_position(index: int) -> tuple[int, int]:
    """
    Position of a checklist item on the grid.

    Args:
        index: 1-based item index

    Returns:
        Zero-based (column, row); columns are filled top to bottom,
        GRID_ROWS items each.
    """
    if index < 1:
        raise IndexError(f"Item index must be >= 1, got {index}")
    return (index - 1) // GRID_ROWS, (index - 1) % GRID_ROWS

def _is_pair(item) -> bool:
    return isinstance(item, (tuple, list))

def checklist_entries(items: Sequence, default_value=None) -> list[tuple[str, bool]]:
    """
    Normalise the three checklist call styles to (label, state) pairs.

    - ["a", "b"]                          all unchecked
    - ["a", "b"], default_value=[True]    states by position, missing = False
    - [("a", False), ("b", True)]         explicit pairs
    """
    if items and _is_pair(items[0]):
        return [(str(label), bool(state)) for label, state in items]

    states = list(default_value) if isinstance(default_value, (list, tuple)) else []
    entries = []
    for i, label in enumerate(items):
        state = bool(states[i]) if i < len(states) else False
        entries.append((str(label), state))
    return entries

def radiolist_entries(items: Sequence, default_value: int | None = None) -> list[tuple[str, bool]]:
    """
    Normalise radiolist arguments to (label, state) pairs.

    With plain labels, `default_value` is the 1-based index of the
    active button.
    """
    if items and _is_pair(items[0]):
        return [(str(label), bool(state)) for label, state in items]
    return [(str(label), i == default_value) for i, label in enumerate(items, start=1)]

def list_rows(items: Sequence) -> list[tuple[bool, str]]:
    """Normalise list rows to (state, label); plain labels start unchecked."""
    if items and _is_pair(items[0]):
        return [(bool(state), str(label)) for state, label in items]
    return [(False, str(label)) for label in items]

def combobox_index(labels: Sequence[str], value) -> int | None:
    for i, label in enumerate(labels):
        if label == value:
            return i
    return None

def message_responses(buttons: str | None) -> tuple[tuple[str, str], ...]:
    """Responses (id, label) for a message box button set; unknown sets have none."""
    if not buttons:
        return ()
    return MESSAGE_BUTTONS.get(buttons.upper(), ())

def page_type(name: str | None) -> str | None:
    if not name:
        return None
    name = name.upper()
    return name if name in PAGE_TYPES else None
