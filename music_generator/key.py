"""Keys: a tonic, a scale kind and the temperament that tunes them.

A :class:`Key` spells its seven-tone scale once at construction (see
:mod:`music_generator.tones`) and hands that scale to its temperament
factory, so a just-intonation key can derive its ratios from the scale shape.
"""

import logging
import typing

import music_generator.temperament
import music_generator.tones


logger = logging.getLogger(__name__)

TemperamentFactory = typing.Callable[
	[float, typing.Sequence[music_generator.tones.Tone]],
	music_generator.temperament.Temperament
]


class KeyCreationError (Exception):

	"""
	Raised when the temperament of a key cannot be built.
	"""

	def __init__ (self, message: str) -> None:

		self.message = message

		super().__init__(f"There was an error creating the Key. {message}")


class Key:

	"""
	A diatonic key tuned by a temperament.
	"""

	def __init__ (
		self,
		tonic: music_generator.tones.Tone,
		scale_kind: music_generator.tones.ScaleKind,
		pitch_standard: float,
		temperament_factory: TemperamentFactory = music_generator.temperament.EqualTemperament
	) -> None:

		"""Spell the scale and build the temperament.

		Parameters:
			tonic: Tonic of the key (e.g. ``Tone.from_string("F#")``).
			scale_kind: ``ScaleKind.MAJOR`` or ``ScaleKind.MINOR``.
			pitch_standard: Frequency of A4 in Hz (see
				:mod:`music_generator.constants.pitch_standards`).
			temperament_factory: Callable taking ``(pitch_standard, scale)``,
				usually a :class:`~music_generator.temperament.Temperament` subclass.

		Raises:
			KeyCreationError: If the temperament cannot be built for the scale.
		"""

		self.tonic = tonic
		self.scale_kind = scale_kind
		self.scale: typing.Tuple[music_generator.tones.Tone, ...] = music_generator.tones.build_scale(tonic, scale_kind)

		try:
			self.temperament = temperament_factory(pitch_standard, self.scale)

		except music_generator.temperament.TemperamentError as error:
			raise KeyCreationError(str(error)) from error

		logger.debug(f"Key {self}: {' '.join(str(tone) for tone in self.scale)}")


	def get_scale_pitches (self, octave: int, start_degree: int, count: int) -> typing.Optional[typing.List[float]]:

		"""Return the frequencies of consecutive scale degrees.

		The first pitch is ``start_degree`` in ``octave``; following degrees
		wrap around the scale and move up an octave each time the scale crosses
		the C seam, so a G major scale started in octave 4 continues with C5.

		Parameters:
			octave: Octave of the first pitch in scientific pitch notation.
			start_degree: Scale degree of the first pitch, 1-7.
			count: Number of pitches.

		Returns:
			List of ``count`` frequencies in Hz, or ``None`` when
			``start_degree`` is out of range or the temperament cannot tune one
			of the tones.

		Example:
			```python
			key = Key(Tone.from_string("C"), ScaleKind.MAJOR, 440.0)
			key.get_scale_pitches(4, 1, 8)
			# [261.626, 293.665, 329.628, 349.228, 391.995, 440.0, 493.883, 523.251]
			```
		"""

		if not 1 <= start_degree <= music_generator.tones.DEGREES_IN_SCALE:
			return None

		pitches: typing.List[float] = []
		octave_increment = 0
		previous_position: typing.Optional[int] = None

		for index in range(start_degree - 1, start_degree - 1 + count):

			tone = self.scale[index % music_generator.tones.DEGREES_IN_SCALE]
			position = music_generator.temperament.get_position(tone)

			# Crossing C (or B#, C#, Db when the scale has no C natural).
			if previous_position is not None and position <= previous_position:
				octave_increment += 1

			previous_position = position

			pitch = self.temperament.get_pitch(octave + octave_increment, tone)

			if pitch is None:
				return None

			pitches.append(pitch)

		return pitches


	def __str__ (self) -> str:

		return f"{self.tonic} {self.scale_kind.value}"


	def __repr__ (self) -> str:

		return f"Key({self}, {self.temperament!r})"
