"""WoW UI XML dialect constants — pure domain values.

These are the fixed vocabulary facts the dialect rules and the structural
checker rely on. They have NO dependency on configuration files.
"""

# ---------------------------------------------------------------------------
# Document shape
# ---------------------------------------------------------------------------

ROOT_ELEMENT = "Ui"
NAMESPACE_URI = "http://www.blizzard.com/wow/ui/"

# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

# Removed from the XML dialect in 9.0 (Shadowlands); backdrops are set from Lua.
DEPRECATED_ELEMENT = "Backdrop"

# Child of the legacy backdrop, paired open/close in hand-written files.
INSETS_ELEMENT = "BackgroundInsets"

FRAME_ELEMENT = "Frame"

# Elements that almost always carry children; self-closing them is suspicious.
CHILD_BEARING_ELEMENTS = (FRAME_ELEMENT, "Button", DEPRECATED_ELEMENT)
