"""Durations in time units.

Durations use the time unit box system: a musical element lasts a whole
number of boxes of one fixed length. The length of a box in seconds comes
from the tempo, one box per beat (see ``Voice.get_duration``).
"""

UNIT = 1

# Default for generated notes and rests
DEFAULT_DURATION = UNIT
