"""
Shared constants for mixed-key ordering.
"""

# Only ASCII digits start a numeric run; other Unicode digits are plain text.
DIGIT_LOW = "0"
DIGIT_HIGH = "9"

# Default placement of missing values (None / NaN) in pandas ordering:
# "first" or "last".
MISSING_POSITION = "last"
