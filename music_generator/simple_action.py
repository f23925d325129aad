"""A one-to-one mapping from letters to scale degrees.

:class:`SimpleAction` maps the 26 upper-case letters ``A``-``Z`` followed by
the 23 lower-case letters ``a``-``w`` to 49 consecutive degrees of a key's
scale (seven octaves, starting with degree 1 in octave 4). The letter ``x``
is a rest. It needs no state, so it is used with
:class:`~music_generator.action.NeutralActionState`.
"""

import logging
import string
import typing

import music_generator.action
import music_generator.constants.durations
import music_generator.constants.volume
import music_generator.key
import music_generator.musical_element


logger = logging.getLogger(__name__)

NOTE_SYMBOLS = string.ascii_uppercase + string.ascii_lowercase[:23]
REST_SYMBOL = "x"

START_OCTAVE = 4
START_DEGREE = 1


class MappingError (Exception):

	"""
	Raised for a symbol the action has no element for.
	"""

	def __init__ (self, symbol: str) -> None:

		self.symbol = symbol

		super().__init__(f"Unexpected symbol: '{symbol}'")


class PitchError (Exception):

	"""
	Raised when a key yields no pitches for the mapped degrees.
	"""

	def __init__ (self, key: music_generator.key.Key) -> None:

		self.key_name = str(key)
		self.scale_kind = key.scale_kind

		super().__init__(f"No pitches for a {key.scale_kind.value} scale on a {key.tonic} key")


class SimpleAction (music_generator.action.Action[music_generator.action.NeutralActionState]):

	"""
	Maps letters to the degrees of a key and ``x`` to a rest.
	"""

	def __init__ (
		self,
		key: music_generator.key.Key,
		duration: int = music_generator.constants.durations.DEFAULT_DURATION,
		volume: int = music_generator.constants.volume.DEFAULT_VOLUME
	) -> None:

		"""Initialize the mapping for a key.

		Parameters:
			key: Key whose scale supplies the pitches.
			duration: Time units of every note and rest (default 1).
			volume: Volume level of every note (default ``M``).
		"""

		self.key = key
		self.duration = duration
		self.volume = volume

		self._pitches: typing.Optional[typing.List[float]] = None
		self._pitches_resolved = False


	def get_pitches (self) -> typing.Optional[typing.List[float]]:

		"""
		Return the 49 mapped pitches, computed once per action.
		"""

		if not self._pitches_resolved:
			self._pitches = self.key.get_scale_pitches(
				START_OCTAVE,
				START_DEGREE,
				len(NOTE_SYMBOLS)
			)
			self._pitches_resolved = True

			if self._pitches is None:
				logger.warning(f"Key {self.key} produced no pitches for {len(NOTE_SYMBOLS)} degrees")

		return self._pitches


	def gen_next_musical_element (
		self,
		symbol: str,
		state: music_generator.action.NeutralActionState
	) -> typing.Tuple[music_generator.musical_element.MusicalElement, music_generator.action.NeutralActionState]:

		"""Return a note for a letter or a rest for ``x``.

		Raises:
			ActionError: ``GENERATION_ERROR`` caused by :class:`MappingError` for
				unknown symbols, or by :class:`PitchError` when the key cannot
				produce pitches.

		Example:
			```python
			action = SimpleAction(Key(Tone.from_string("C"), ScaleKind.MAJOR, 440.0))
			state = NeutralActionState.get_neutral_state()

			action.gen_next_musical_element("A", state)  # (Note(pitch=261.6..., ...), state)
			action.gen_next_musical_element("x", state)  # (Rest(duration=1), state)
			```
		"""

		if symbol == REST_SYMBOL:
			return music_generator.musical_element.Rest(duration=self.duration), state

		index = NOTE_SYMBOLS.find(symbol) if len(symbol) == 1 else -1

		if index < 0:
			error: Exception = MappingError(symbol)
			raise music_generator.action.ActionError.from_generation_error(error) from error

		pitches = self.get_pitches()

		if pitches is None:
			error = PitchError(self.key)
			raise music_generator.action.ActionError.from_generation_error(error) from error

		note = music_generator.musical_element.Note(
			pitch = pitches[index],
			duration = self.duration,
			volume = self.volume
		)

		return note, state
