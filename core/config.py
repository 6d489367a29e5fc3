"""
Application-wide constants.

Values that the UI exposes to the user (array size, playback speed) are only
defaults here; the live values are held by the controllers.
"""
# Working array values are drawn from [MIN_VALUE, MAX_VALUE]; counting sort
# relies on this bound.
MIN_VALUE = 0
MAX_VALUE = 300

DEFAULT_ARRAY_SIZE = 150
MIN_ARRAY_SIZE = 5
MAX_ARRAY_SIZE = 300
# bubble sort is too slow to watch past this size
BUBBLE_SORT_SIZE_LIMIT = 200

# Tick intervals in ms at 1.0x speed
REPLAY_INTERVAL_MS = 5
VALIDATION_INTERVAL_MS = 10

HIGHLIGHT_COLOR = "green"

# px added to every bar so that neighbouring bars overlap instead of gapping
BAR_PADDING = 3

