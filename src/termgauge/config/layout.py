"""
Width budget for bar rendering.

All values are terminal cells.
"""

FALLBACK_WIDTH = 60
"""Track width used when the terminal size cannot be queried"""

PERCENT_RESERVE = 5
"""Space kept free for the percentage suffix (" 100%")"""

ETA_RESERVE = 12
"""Space kept free for the ETA suffix (" ETA: 00:00")"""

TRACK_MARGIN = 2
"""Cells left unused at the line edge"""

MIN_TRACK_WIDTH = 10
"""Narrowest track ever rendered, even on tiny terminals"""

CLEAR_PADDING = 5
"""Extra blank cells written when clearing a bar line"""
