"""Tuning systems that turn an (octave, tone) pair into a frequency.

Two temperaments are provided:

- :class:`EqualTemperament` divides the octave into twelve equal semitones,
  anchored at A4 = ``pitch_standard``.
- :class:`JustIntonation` derives every degree of a seven-tone scale from
  whole-number step ratios (``8:9``, ``9:10``, ``15:16``) chained from the
  scale's A. The chain is composed with :class:`~music_generator.proportion.Proportion`
  so it stays exact until the final conversion to Hz.

Octave numbers follow scientific pitch notation with the octave seam at C, and
the position table treats enharmonic spellings alike: ``B#4`` sounds as
``C4`` and ``Cb4`` as ``B4``.
"""

import abc
import typing

import music_generator.proportion
import music_generator.tones


OCTAVE_ADDITIVE = 12
OCTAVE_MULTIPLICATIVE = 2

REFERENCE_PITCH_OCTAVE = 4
REFERENCE_PITCH_POSITION = 10

# Position of each tone spelling in the twelve-tone system, C = 1 ... B = 12.
TWELVE_TONE_POSITION: typing.Dict[str, int] = {
	"Cb": 12,
	"C":  1,
	"C#": 2,
	"Db": 2,
	"D":  3,
	"D#": 4,
	"Eb": 4,
	"E":  5,
	"E#": 6,
	"Fb": 5,
	"F":  6,
	"F#": 7,
	"Gb": 7,
	"G":  8,
	"G#": 9,
	"Ab": 9,
	"A":  10,
	"A#": 11,
	"Bb": 11,
	"B":  12,
	"B#": 1,
}

# Step ratios between successive degrees of a major scale, degree 1 -> 2 first.
MAJOR_STEP_PROPORTIONS: typing.List[music_generator.proportion.Proportion] = [
	music_generator.proportion.Proportion(8, 9),
	music_generator.proportion.Proportion(9, 10),
	music_generator.proportion.Proportion(15, 16),
	music_generator.proportion.Proportion(8, 9),
	music_generator.proportion.Proportion(8, 9),
	music_generator.proportion.Proportion(9, 10),
	music_generator.proportion.Proportion(15, 16),
]

MAJOR_STEP_SEMITONES: typing.List[int] = [2, 2, 1, 2, 2, 2, 1]

Scale = typing.Sequence[music_generator.tones.Tone]


class TemperamentError (Exception):

	"""
	Raised when a temperament cannot be built for a scale.
	"""

	def __init__ (self, message: str) -> None:

		self.message = message

		super().__init__(f"There was a problem creating the temperament. {message}")


def get_position (tone: music_generator.tones.Tone) -> int:

	"""Return the position (1-12) of a tone in the twelve-tone system.

	Example:
		```python
		get_position(Tone.from_string("A"))   # 10
		get_position(Tone.from_string("B#"))  # 1
		```
	"""

	return TWELVE_TONE_POSITION[str(tone)]


class Temperament (abc.ABC):

	"""Abstract base for tuning systems.

	Subclasses are constructed from a pitch standard (the frequency of A4 in
	Hz) and the seven-tone scale of the key they serve, so they can be passed
	as the ``temperament_factory`` of a :class:`~music_generator.key.Key`.
	"""

	pitch_standard: float

	@abc.abstractmethod
	def __init__ (self, pitch_standard: float, scale: Scale) -> None:

		...

	@abc.abstractmethod
	def get_pitch (self, octave: int, tone: music_generator.tones.Tone) -> typing.Optional[float]:

		"""Return the frequency in Hz of a tone in an octave, or None if the tone cannot be tuned."""

		...


class EqualTemperament (Temperament):

	"""
	Twelve-tone equal temperament anchored at A4.
	"""

	def __init__ (self, pitch_standard: float, scale: typing.Optional[Scale] = None) -> None:

		"""
		The scale is accepted for a uniform constructor signature and ignored.
		"""

		self.pitch_standard = pitch_standard


	def get_pitch (self, octave: int, tone: music_generator.tones.Tone) -> typing.Optional[float]:

		"""Return ``pitch_standard * 2 ** (semitones_from_A4 / 12)``.

		Example:
			```python
			temperament = EqualTemperament(440.0)
			temperament.get_pitch(4, Tone.from_string("C"))  # 261.6255...
			temperament.get_pitch(5, Tone.from_string("C"))  # 523.2511...
			```
		"""

		octave_interval = (octave - REFERENCE_PITCH_OCTAVE) * OCTAVE_ADDITIVE
		relative_a = get_position(tone) - REFERENCE_PITCH_POSITION
		interval_size = relative_a + octave_interval

		return self.pitch_standard * OCTAVE_MULTIPLICATIVE ** (interval_size / OCTAVE_ADDITIVE)


	def __repr__ (self) -> str:

		return f"EqualTemperament(pitch_standard={self.pitch_standard})"


class JustIntonation (Temperament):

	"""
	A seven-tone temperament built from whole-number step ratios.
	"""

	def __init__ (self, pitch_standard: float, scale: Scale) -> None:

		"""Derive the step proportions and reference degree from a diatonic scale.

		The scale's A (whatever its accidental) is the reference degree. Its
		frequency at octave 4 is taken from equal temperament, which equals
		``pitch_standard`` when the scale contains A natural.

		Raises:
			TemperamentError: If the scale does not have seven tones, has no
				tone named A, or is not a rotation of the major scale.
		"""

		if len(scale) != music_generator.tones.DEGREES_IN_SCALE:
			raise TemperamentError(
				f"Just intonation needs a scale of {music_generator.tones.DEGREES_IN_SCALE} tones, got {len(scale)}."
			)

		self.scale: typing.Tuple[music_generator.tones.Tone, ...] = tuple(scale)
		self.reference_pitch_degree = self._find_reference_degree(self.scale)
		self.proportionen = self._calc_proportionen(self.scale)

		reference_tone = self.scale[self.reference_pitch_degree]
		self.pitch_standard = EqualTemperament(pitch_standard).get_pitch(REFERENCE_PITCH_OCTAVE, reference_tone)


	@staticmethod
	def _find_reference_degree (scale: typing.Sequence[music_generator.tones.Tone]) -> int:

		"""
		Return the zero-based degree of the scale's A.
		"""

		for degree, tone in enumerate(scale):
			if tone.note_name is music_generator.tones.NoteName.A:
				return degree

		raise TemperamentError("Couldn't find NoteName A in given scale.")


	@staticmethod
	def _calc_proportionen (scale: typing.Sequence[music_generator.tones.Tone]) -> typing.List[music_generator.proportion.Proportion]:

		"""Match the scale's semitone steps to a rotation of the major pattern.

		A major scale gets ``MAJOR_STEP_PROPORTIONS`` unchanged; a natural minor
		scale, which starts on the major scale's sixth degree, gets the same
		ratios starting from the sixth.
		"""

		steps = [
			(get_position(scale[(i + 1) % len(scale)]) - get_position(scale[i])) % OCTAVE_ADDITIVE
			for i in range(len(scale))
		]

		for offset in range(len(MAJOR_STEP_SEMITONES)):

			rotated = MAJOR_STEP_SEMITONES[offset:] + MAJOR_STEP_SEMITONES[:offset]

			if rotated == steps:
				return MAJOR_STEP_PROPORTIONS[offset:] + MAJOR_STEP_PROPORTIONS[:offset]

		raise TemperamentError(f"Scale step pattern {steps} is not diatonic.")


	def get_pitch (self, octave: int, tone: music_generator.tones.Tone) -> typing.Optional[float]:

		"""Return the just frequency of a scale tone, or None if the tone is not in the scale.

		Steps are fused upward from the reference degree to the target when
		the target sounds above the reference in the same octave, otherwise
		from the target up to the reference and then inverted.
		"""

		target_degree = self._degree_of(tone)

		if target_degree is None:
			return None

		degrees = len(self.scale)
		reference_tone = self.scale[self.reference_pitch_degree]
		relative = get_position(tone) - get_position(reference_tone)

		position_proportion = music_generator.proportion.UNIT

		if relative > 0:

			for step in range((target_degree - self.reference_pitch_degree) % degrees):
				index = (self.reference_pitch_degree + step) % degrees
				position_proportion = position_proportion.fusion(self.proportionen[index])

		elif relative < 0:

			for step in range((self.reference_pitch_degree - target_degree) % degrees):
				index = (target_degree + step) % degrees
				position_proportion = position_proportion.fusion(self.proportionen[index])

			position_proportion = position_proportion.invert()

		octave_proportion = music_generator.proportion.OCTAVE_UP.pow(octave - REFERENCE_PITCH_OCTAVE)

		return octave_proportion.fusion(position_proportion).scale(self.pitch_standard)


	def _degree_of (self, tone: music_generator.tones.Tone) -> typing.Optional[int]:

		"""
		Return the zero-based degree of a tone, matching enharmonic spellings.
		"""

		position = get_position(tone)

		for degree, scale_tone in enumerate(self.scale):
			if get_position(scale_tone) == position:
				return degree

		return None


	def __repr__ (self) -> str:

		return (
			f"JustIntonation(pitch_standard={self.pitch_standard}, "
			f"proportionen=[{', '.join(str(p) for p in self.proportionen)}])"
		)
