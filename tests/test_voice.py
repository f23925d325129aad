import typing

import pytest

import music_generator.action
import music_generator.key
import music_generator.l_system
import music_generator.musical_element
import music_generator.simple_action
import music_generator.tones
import music_generator.voice


def _atom (symbol: str) -> music_generator.l_system.Atom:

	return music_generator.l_system.Atom(symbol)


@pytest.fixture
def simple_action () -> music_generator.simple_action.SimpleAction:

	"""SimpleAction on C major, equal temperament."""

	key = music_generator.key.Key(
		music_generator.tones.Tone.from_string("C"),
		music_generator.tones.ScaleKind.MAJOR,
		440.0
	)

	return music_generator.simple_action.SimpleAction(key)


def test_from_axiom_simple (simple_action: music_generator.simple_action.SimpleAction) -> None:

	"""Each symbol with an action contributes one element."""

	axiom = music_generator.l_system.Axiom.from_string("AxCA")
	atom_types = {atom: music_generator.action.has_action(simple_action) for atom in axiom}

	voice = music_generator.voice.Voice.from_axiom(axiom, atom_types)

	assert len(voice) == 4
	assert isinstance(voice.musical_elements[1], music_generator.musical_element.Rest)
	assert voice.musical_elements[2].pitch == pytest.approx(329.628, abs=1e-3)
	assert voice.musical_elements[0] == voice.musical_elements[3]


def test_no_action_atoms_skipped (simple_action: music_generator.simple_action.SimpleAction) -> None:

	"""NO_ACTION atoms produce nothing."""

	axiom = music_generator.l_system.Axiom.from_string("A+B-")
	atom_types = {
		_atom("A"): music_generator.action.has_action(simple_action),
		_atom("B"): music_generator.action.has_action(simple_action),
		_atom("+"): music_generator.action.NO_ACTION,
		_atom("-"): music_generator.action.NO_ACTION,
	}

	voice = music_generator.voice.Voice.from_axiom(axiom, atom_types)

	assert len(voice) == 2


def test_undefined_atom_type (simple_action: music_generator.simple_action.SimpleAction) -> None:

	"""An atom missing from the table aborts the build."""

	axiom = music_generator.l_system.Axiom.from_string("AB")
	atom_types = {_atom("A"): music_generator.action.has_action(simple_action)}

	with pytest.raises(music_generator.action.ActionError) as info:
		music_generator.voice.Voice.from_axiom(axiom, atom_types)

	assert info.value.kind is music_generator.action.ErrorKind.UNDEFINED_ATOM_TYPE


def test_neutral_state_brackets_are_harmless (simple_action: music_generator.simple_action.SimpleAction) -> None:

	"""Push and pop on the neutral state never fail."""

	axiom = music_generator.l_system.Axiom.from_string("A]]B[")
	atom_types = {
		_atom("A"): music_generator.action.has_action(simple_action),
		_atom("B"): music_generator.action.has_action(simple_action),
		_atom("["): music_generator.action.PUSH_STACK,
		_atom("]"): music_generator.action.POP_STACK,
	}

	assert len(music_generator.voice.Voice.from_axiom(axiom, atom_types)) == 2


def _bracket_atom_types (action: music_generator.action.Action) -> typing.Dict[music_generator.l_system.Atom, music_generator.action.AtomType]:

	return {
		_atom("N"): music_generator.action.has_action(action),
		_atom("U"): music_generator.action.has_action(action),
		_atom("["): music_generator.action.PUSH_STACK,
		_atom("]"): music_generator.action.POP_STACK,
	}


def test_stack_state_brackets (octave_action: music_generator.action.Action, pitch_state: music_generator.action.StackActionState) -> None:

	"""Bracketed branches restore the state on exit."""

	axiom = music_generator.l_system.Axiom.from_string("N[UN[U]N]N")

	voice = music_generator.voice.Voice.from_axiom(axiom, _bracket_atom_types(octave_action), pitch_state)

	assert [note.pitch for note in voice] == [110.0, 220.0, 220.0, 440.0, 220.0, 110.0]


def test_stack_state_pop_on_empty (octave_action: music_generator.action.Action, pitch_state: music_generator.action.StackActionState) -> None:

	"""Closing an unopened bracket aborts the build."""

	axiom = music_generator.l_system.Axiom.from_string("N]N")

	with pytest.raises(music_generator.action.ActionError) as info:
		music_generator.voice.Voice.from_axiom(axiom, _bracket_atom_types(octave_action), pitch_state)

	assert info.value.kind is music_generator.action.ErrorKind.POP_ON_EMPTY_STACK


def test_generation_error_propagates (simple_action: music_generator.simple_action.SimpleAction) -> None:

	"""Action errors abort the build."""

	axiom = music_generator.l_system.Axiom.from_string("Ay")
	atom_types = {atom: music_generator.action.has_action(simple_action) for atom in axiom}

	with pytest.raises(music_generator.action.ActionError) as info:
		music_generator.voice.Voice.from_axiom(axiom, atom_types)

	assert info.value.kind is music_generator.action.ErrorKind.GENERATION_ERROR


def test_length_and_duration () -> None:

	"""Length counts time units; duration converts them at one beat each."""

	voice = music_generator.voice.Voice.from_musical_elements([
		music_generator.musical_element.Note(440.0, duration=2),
		music_generator.musical_element.Rest(1),
		music_generator.musical_element.Note(220.0),
	])

	assert voice.get_len() == 4
	assert voice.get_duration(120) == pytest.approx(2.0)
	assert voice.get_duration(60) == pytest.approx(4.0)
	assert voice.get_time_unit_schedule() == [(0, 2), (2, 3), (3, 4)]


def test_sequence () -> None:

	"""Sequencing places notes and rests in seconds."""

	voice = music_generator.voice.Voice.from_musical_elements([
		music_generator.musical_element.Note(440.0, duration=2, volume=84),
		music_generator.musical_element.Rest(1),
		music_generator.musical_element.Note(220.0),
	])

	events = voice.sequence(bpm=120)

	assert events[0] == music_generator.voice.ScheduledElement(False, 440.0, 0.0, 1.0, 84)
	assert events[1].is_rest
	assert events[1].frequency is None
	assert events[1].volume == 0
	assert (events[1].start, events[1].stop) == pytest.approx((1.0, 1.5))
	assert (events[2].start, events[2].stop) == pytest.approx((1.5, 2.0))


def test_empty_voice () -> None:

	"""An empty voice has no length and no events."""

	voice = music_generator.voice.Voice.from_musical_elements([])

	assert voice.get_len() == 0
	assert voice.sequence(100) == []


def test_non_positive_bpm () -> None:

	"""Tempo must be positive."""

	voice = music_generator.voice.Voice.from_musical_elements([music_generator.musical_element.Rest()])

	with pytest.raises(ValueError):
		voice.get_duration(0)

	with pytest.raises(ValueError):
		voice.sequence(-10)
