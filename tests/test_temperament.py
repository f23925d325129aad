import pytest

import music_generator.proportion
import music_generator.temperament
import music_generator.tones


def _tone (text: str) -> music_generator.tones.Tone:

	return music_generator.tones.Tone.from_string(text)


C_MAJOR = music_generator.tones.major_scale(music_generator.tones.Tone.from_string("C"))


def test_equal_temperament_reference_pitches () -> None:

	"""A4 is the pitch standard; C4 and C5 follow from twelve equal steps."""

	temperament = music_generator.temperament.EqualTemperament(440.0)

	assert temperament.get_pitch(4, _tone("A")) == pytest.approx(440.0)
	assert temperament.get_pitch(4, _tone("C")) == pytest.approx(261.626, abs=1e-3)
	assert temperament.get_pitch(5, _tone("C")) == pytest.approx(523.251, abs=1e-3)
	assert temperament.get_pitch(3, _tone("A")) == pytest.approx(220.0)


def test_equal_temperament_enharmonics () -> None:

	"""Enharmonic spellings share a frequency."""

	temperament = music_generator.temperament.EqualTemperament(440.0)

	assert temperament.get_pitch(4, _tone("B#")) == temperament.get_pitch(4, _tone("C"))
	assert temperament.get_pitch(4, _tone("Db")) == temperament.get_pitch(4, _tone("C#"))
	assert temperament.get_pitch(4, _tone("Fb")) == temperament.get_pitch(4, _tone("E"))


def test_equal_temperament_other_standard () -> None:

	"""The pitch standard moves every pitch."""

	temperament = music_generator.temperament.EqualTemperament(415.0)

	assert temperament.get_pitch(4, _tone("A")) == pytest.approx(415.0)
	assert temperament.get_pitch(5, _tone("A")) == pytest.approx(830.0)


def test_just_intonation_c_major_proportions () -> None:

	"""C major uses the major step ratios and A as reference."""

	temperament = music_generator.temperament.JustIntonation(440.0, C_MAJOR)

	assert temperament.reference_pitch_degree == 5
	assert temperament.proportionen == music_generator.temperament.MAJOR_STEP_PROPORTIONS
	assert temperament.pitch_standard == pytest.approx(440.0)


def test_just_intonation_c_major_pitches () -> None:

	"""The just C major scale from C4 to C5."""

	temperament = music_generator.temperament.JustIntonation(440.0, C_MAJOR)

	expected = [260.741, 293.333, 325.926, 347.654, 391.111, 440.000, 488.889]

	for tone, pitch in zip(C_MAJOR, expected):
		assert temperament.get_pitch(4, tone) == pytest.approx(pitch, abs=1e-3)

	assert temperament.get_pitch(5, _tone("C")) == pytest.approx(521.481, abs=1e-3)


def test_just_intonation_minor_rotation () -> None:

	"""A natural minor scale gets the major ratios starting from the sixth step."""

	a_minor = music_generator.tones.minor_scale(_tone("A"))
	temperament = music_generator.temperament.JustIntonation(440.0, a_minor)

	assert temperament.reference_pitch_degree == 0
	assert temperament.proportionen[0] == music_generator.proportion.Proportion(9, 10)
	assert temperament.proportionen[1] == music_generator.proportion.Proportion(15, 16)


def test_just_intonation_unknown_tone () -> None:

	"""Tones outside the scale cannot be tuned."""

	temperament = music_generator.temperament.JustIntonation(440.0, C_MAJOR)

	assert temperament.get_pitch(4, _tone("F#")) is None


def test_just_intonation_rejects_bad_scales () -> None:

	"""Scales of the wrong length or shape are rejected."""

	with pytest.raises(music_generator.temperament.TemperamentError, match="problem creating the temperament"):
		music_generator.temperament.JustIntonation(440.0, C_MAJOR[:6])

	no_a = tuple(_tone(text) for text in ["C", "D", "E", "F", "G", "Bb", "B"])

	with pytest.raises(music_generator.temperament.TemperamentError, match="NoteName A"):
		music_generator.temperament.JustIntonation(440.0, no_a)

	harmonic_minor = tuple(_tone(text) for text in ["A", "B", "C", "D", "E", "F", "G#"])

	with pytest.raises(music_generator.temperament.TemperamentError, match="not diatonic"):
		music_generator.temperament.JustIntonation(440.0, harmonic_minor)


def test_get_position () -> None:

	"""Positions run from C = 1 to B = 12."""

	assert music_generator.temperament.get_position(_tone("C")) == 1
	assert music_generator.temperament.get_position(_tone("A")) == 10
	assert music_generator.temperament.get_position(_tone("Cb")) == 12
