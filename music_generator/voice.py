"""Voices: timed sequences of notes and rests built from an axiom.

:meth:`Voice.from_axiom` walks an expanded axiom and drives the action state
machine described in :mod:`music_generator.action`. The finished voice is
handed to an external renderer as a list of :class:`ScheduledElement` events
(see :meth:`Voice.sequence`).

Example:
	```python
	axiom = l_system.expand(Axiom.from_string("ABCD"), ruleset, 3)
	action = SimpleAction(key)
	atom_types = {atom: action_module.has_action(action) for atom in axiom}

	voice = Voice.from_axiom(axiom, atom_types)
	events = voice.sequence(bpm=120)
	```
"""

import dataclasses
import logging
import typing

import music_generator.action
import music_generator.constants.volume
import music_generator.l_system
import music_generator.musical_element


logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60.0


def bpm_to_hz (bpm: float) -> float:

	"""Convert beats per minute to beats per second.

	Raises:
		ValueError: If ``bpm`` is not positive.
	"""

	if bpm <= 0:
		raise ValueError("BPM must be positive")

	return bpm / SECONDS_PER_MINUTE


@dataclasses.dataclass(frozen=True)
class ScheduledElement:

	"""
	A note or rest placed in real time, ready for rendering.

	Attributes:
		is_rest: True for rests.
		frequency: Pitch in Hz, ``None`` for rests.
		start: Start time in seconds.
		stop: Stop time in seconds.
		volume: Volume level (0-252), 0 for rests.
	"""

	is_rest: bool
	frequency: typing.Optional[float]
	start: float
	stop: float
	volume: int


@dataclasses.dataclass(frozen=True)
class Voice:

	"""
	An immutable, ordered sequence of notes and rests.
	"""

	musical_elements: typing.Tuple[music_generator.musical_element.MusicalElement, ...] = ()


	@classmethod
	def from_musical_elements (cls, musical_elements: typing.Iterable[music_generator.musical_element.MusicalElement]) -> "Voice":

		"""
		Build a voice directly from elements.
		"""

		return cls(musical_elements=tuple(musical_elements))


	@classmethod
	def from_axiom (
		cls,
		axiom: music_generator.l_system.Axiom,
		atom_types: typing.Mapping[music_generator.l_system.Atom, music_generator.action.AtomType],
		initial_state: typing.Optional[music_generator.action.ActionState] = None
	) -> "Voice":

		"""Interpret every atom of an axiom and collect the resulting elements.

		Parameters:
			axiom: The (usually expanded) axiom to interpret.
			atom_types: What to do with each atom. Every atom of the axiom must
				have an entry.
			initial_state: Starting action state (default: a fresh
				:class:`~music_generator.action.NeutralActionState`).

		Raises:
			ActionError: ``UNDEFINED_ATOM_TYPE`` for an atom with no entry,
				``POP_ON_EMPTY_STACK`` from the state, or ``GENERATION_ERROR``
				from an action. No partial voice is returned.
		"""

		state = initial_state

		if state is None:
			state = music_generator.action.NeutralActionState.get_neutral_state()

		musical_elements: typing.List[music_generator.musical_element.MusicalElement] = []

		for atom in axiom.atoms():

			atom_type = atom_types.get(atom)

			if atom_type is None:
				logger.debug(f"No atom type for '{atom}'")
				raise music_generator.action.ActionError.from_error_kind(
					music_generator.action.ErrorKind.UNDEFINED_ATOM_TYPE
				)

			if atom_type.kind is music_generator.action.AtomKind.HAS_ACTION:
				element, state = atom_type.action.gen_next_musical_element(atom.symbol, state)
				musical_elements.append(element)

			elif atom_type.kind is music_generator.action.AtomKind.PUSH_STACK:
				state = state.push()

			elif atom_type.kind is music_generator.action.AtomKind.POP_STACK:
				state = state.pop()

		voice = cls.from_musical_elements(musical_elements)

		logger.debug(f"Built voice of {len(voice)} elements ({voice.get_len()} time units) from {len(axiom)} atoms")

		return voice


	def get_len (self) -> int:

		"""
		Return the total duration in time units.
		"""

		return sum(element.duration for element in self.musical_elements)


	def get_duration (self, bpm: float) -> float:

		"""
		Return the total duration in seconds at a tempo, one time unit per beat.
		"""

		return self.get_len() / bpm_to_hz(bpm)


	def get_time_unit_schedule (self) -> typing.List[typing.Tuple[int, int]]:

		"""Return ``(start, stop)`` in time units for each element.

		Example:
			```python
			Voice.from_musical_elements([Note(440.0, 2), Rest(1), Note(220.0)]).get_time_unit_schedule()
			# [(0, 2), (2, 3), (3, 4)]
			```
		"""

		schedule: typing.List[typing.Tuple[int, int]] = []
		last_time_unit = 0

		for element in self.musical_elements:
			start = last_time_unit
			last_time_unit += element.duration
			schedule.append((start, last_time_unit))

		return schedule


	def sequence (self, bpm: float) -> typing.List[ScheduledElement]:

		"""
		Place every element in real time at a tempo.
		"""

		bpm_in_hz = bpm_to_hz(bpm)
		events: typing.List[ScheduledElement] = []

		for element, (start, stop) in zip(self.musical_elements, self.get_time_unit_schedule()):

			if isinstance(element, music_generator.musical_element.Note):
				events.append(ScheduledElement(
					is_rest = False,
					frequency = element.pitch,
					start = start / bpm_in_hz,
					stop = stop / bpm_in_hz,
					volume = element.volume
				))

			else:
				events.append(ScheduledElement(
					is_rest = True,
					frequency = None,
					start = start / bpm_in_hz,
					stop = stop / bpm_in_hz,
					volume = music_generator.constants.volume.SILENT
				))

		return events


	def __len__ (self) -> int:

		return len(self.musical_elements)


	def __iter__ (self) -> typing.Iterator[music_generator.musical_element.MusicalElement]:

		return iter(self.musical_elements)
