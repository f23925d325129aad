import typing

import pytest

import music_generator.action
import music_generator.musical_element


class PitchState (music_generator.action.StackActionState):

	"""Stack state whose values are pitches, starting at 110 Hz."""

	neutral_value = 110.0


class OctaveAction (music_generator.action.Action[PitchState]):

	"""'N' plays the current pitch, 'U' moves it up an octave first."""

	def gen_next_musical_element (
		self,
		symbol: str,
		state: PitchState
	) -> typing.Tuple[music_generator.musical_element.MusicalElement, PitchState]:

		if symbol == "U":
			state = state.with_current(state.current * 2)

		return music_generator.musical_element.Note(pitch=state.current), state


@pytest.fixture
def pitch_state () -> PitchState:

	"""A fresh stack state at 110 Hz."""

	return PitchState.get_neutral_state()


@pytest.fixture
def octave_action () -> OctaveAction:

	"""A stateful action for bracketed grammars."""

	return OctaveAction()
