"""Notes and rests produced from grammar symbols."""

import dataclasses
import typing

import music_generator.constants.durations
import music_generator.constants.volume


@dataclasses.dataclass(frozen=True)
class Rest:

	"""
	Silence lasting a number of time units.
	"""

	duration: int = music_generator.constants.durations.DEFAULT_DURATION


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A pitched note: frequency in Hz, duration in time units and a volume level.
	"""

	pitch: float
	duration: int = music_generator.constants.durations.DEFAULT_DURATION
	volume: int = music_generator.constants.volume.DEFAULT_VOLUME


MusicalElement = typing.Union[Rest, Note]
