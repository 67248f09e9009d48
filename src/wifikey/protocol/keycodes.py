"""Key codes understood by the WifiKeyboard key endpoint.

The device forwards key events using browser keyCode values, the same
numbers a JavaScript ``keydown`` handler sees. The table below is not
exhaustive: Session.key_down/key_up accept any integer and pass it
through unchanged.
"""

from __future__ import annotations

import enum


class KeyCode(enum.IntEnum):
    """Browser keyCode values for the non-printable keys."""

    BACKSPACE = 8
    TAB = 9
    RETURN = 13
    SHIFT = 16
    CTRL = 17
    ALT = 18
    ESCAPE = 27
    SPACE = 32
    PAGE_UP = 33
    PAGE_DOWN = 34
    END = 35
    BEGIN = 36
    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40
    INSERT = 45
    DEL = 46


# Module-level aliases for the codes used most often
RIGHT: int = KeyCode.RIGHT
LEFT: int = KeyCode.LEFT
RETURN: int = KeyCode.RETURN
END: int = KeyCode.END
BEGIN: int = KeyCode.BEGIN
SHIFT: int = KeyCode.SHIFT
DEL: int = KeyCode.DEL

# ---------------------------------------------------------------------------
# Friendly names -> key code (lowercase)
# ---------------------------------------------------------------------------

KEY_ALIASES: dict[str, KeyCode] = {
    "enter": KeyCode.RETURN,
    "home": KeyCode.BEGIN,
    "delete": KeyCode.DEL,
    "esc": KeyCode.ESCAPE,
    "control": KeyCode.CTRL,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "ins": KeyCode.INSERT,
}


def key_name_to_code(name: str) -> int:
    """Resolve a key name or a decimal code to an integer key code.

    Names are matched case-insensitively against KeyCode members and
    KEY_ALIASES. A string of digits is returned as-is, so codes missing
    from the table can still be sent.

    Raises:
        ValueError: If the name is neither a known key nor an integer.
    """
    key = name.strip()
    if key.isdigit():
        return int(key)
    lowered = key.lower().replace("-", "_")
    if lowered in KEY_ALIASES:
        return int(KEY_ALIASES[lowered])
    member = KeyCode.__members__.get(lowered.upper())
    if member is not None:
        return int(member)
    raise ValueError(f"Unknown key name: {name!r}")
