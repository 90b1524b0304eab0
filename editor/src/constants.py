"""
Canvas Design Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Component default sizes/properties
- Min/max values and constraints
- Selection and marquee thresholds
- Clipboard and nudge offsets
- Identifier prefixes and default names

Canvas space: pixels, origin at top-left, Y grows downward. x/y of an
instance or group is its TOP-LEFT corner.
"""

# ======================================================================
# SIZE CONSTRAINTS
# ======================================================================

# Floor applied to group width/height during proportional resize
MIN_GROUP_SIZE = 50

# Floor applied when a single component is resized through its handle
MIN_COMPONENT_SIZE = 20

# ======================================================================
# SELECTION
# ======================================================================

# Marquee rectangles smaller than this on BOTH axes count as a click
MARQUEE_DRAG_THRESHOLD = 5

# ======================================================================
# MOVEMENT CONSTANTS
# ======================================================================

# Amount to move components when using arrow keys
NUDGE_STEP_NORMAL = 1    # Normal arrow key movement
NUDGE_STEP_LARGE = 10    # Coarse movement with Shift modifier

NUDGE_DIRECTIONS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}

# ======================================================================
# PASTE OFFSET
# ======================================================================

# Offset applied when pasting/duplicating to make the copy visible
PASTE_OFFSET_X = 20
PASTE_OFFSET_Y = 20

# ======================================================================
# IDENTIFIERS AND NAMES
# ======================================================================

COMPONENT_ID_PREFIX = 'component'
GROUP_ID_PREFIX = 'group'

DEFAULT_STATE_ID = 'default'
DEFAULT_STATE_NAME = 'Default'

# Formatted with the 1-based group count at creation time
DEFAULT_GROUP_NAME_FORMAT = 'Group {index}'
DEFAULT_TEMPLATE_GROUP_NAME = 'Template Group'

# ======================================================================
# STYLE SCALING
# ======================================================================

# Scaled by the average of the X and Y factors during group resize
AVERAGE_SCALED_PIXEL_STRING_KEYS = ('fontSize',)
AVERAGE_SCALED_NUMERIC_KEYS = ('borderRadius', 'borderWidth')

# Scaled by the Y factor only (stroke thickness tracks vertical scale)
VERTICAL_SCALED_NUMERIC_KEYS = ('strokeWidth',)

# ======================================================================
# COMPONENT DEFAULTS (tool placement)
# ======================================================================

DEFAULT_COMPONENT_SIZES = {
    'rectangle': (120, 80),
    'frame': (120, 80),
    'circle': (80, 80),
    'triangle': (80, 80),
    'text': (100, 24),
    'line': (100, 2),
}
DEFAULT_COMPONENT_SIZE_FALLBACK = (100, 100)

_SHAPE_FILL = {
    'backgroundColor': '#f3f4f6',
    'borderColor': '#d1d5db',
    'borderWidth': 1,
}

DEFAULT_COMPONENT_PROPERTIES = {
    'rectangle': dict(_SHAPE_FILL, borderRadius=4),
    'frame': dict(_SHAPE_FILL, borderRadius=4),
    'circle': dict(_SHAPE_FILL),
    'triangle': dict(_SHAPE_FILL),
    'text': {
        'text': 'Text',
        'fontSize': '16px',
        'fontWeight': 'normal',
        'color': '#374151',
        'textAlign': 'left',
    },
    'line': {
        'strokeColor': '#374151',
        'strokeWidth': 2,
    },
}
