import logging
import pathlib

import pytest

import music_generator.config


def test_load_missing_config (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing file gives an empty config and a warning."""

	with caplog.at_level(logging.WARNING):
		config = music_generator.config.load_config(str(tmp_path / "missing.yaml"))

	assert config == {}
	assert "not found" in caplog.text


def test_load_config (tmp_path: pathlib.Path) -> None:

	"""YAML files load into plain dictionaries."""

	path = tmp_path / "config.yaml"
	path.write_text(
		"voice:\n"
		"  axiom: ABx\n"
		"  rules: ['A->AB']\n"
		"  tonic: Bb\n"
		"  pitch_standard: baroque\n"
	)

	config = music_generator.config.load_config(str(path))
	voice_config = music_generator.config.VoiceConfig.from_dict(config["voice"])

	assert voice_config.axiom == "ABx"
	assert voice_config.rules == ["A->AB"]
	assert voice_config.tonic == "Bb"
	assert voice_config.pitch_standard == 415.0


def test_empty_config_file (tmp_path: pathlib.Path) -> None:

	"""An empty file is an empty config."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert music_generator.config.load_config(str(path)) == {}


def test_defaults () -> None:

	"""Only the axiom is required."""

	voice_config = music_generator.config.VoiceConfig.from_dict({"axiom": "A"})

	assert voice_config.rules == []
	assert voice_config.generations == 3
	assert voice_config.tonic == "C"
	assert voice_config.scale_kind == "major"
	assert voice_config.temperament == "equal"
	assert voice_config.pitch_standard == 440.0
	assert voice_config.bpm == 120


def test_numeric_pitch_standard () -> None:

	"""Pitch standards may be given in Hz."""

	assert music_generator.config.resolve_pitch_standard(432) == 432.0
	assert music_generator.config.resolve_pitch_standard("Chorton") == 466.0


@pytest.mark.parametrize("data, message", [
	({}, "axiom"),
	({"axiom": ""}, "axiom"),
	({"axiom": "A", "rules": "A->B"}, "rules"),
	({"axiom": "A", "generations": -1}, "generations"),
	({"axiom": "A", "tonic": "H"}, "Unknown tone"),
	({"axiom": "A", "scale_kind": "dorian"}, "scale kind"),
	({"axiom": "A", "temperament": "meantone"}, "temperament"),
	({"axiom": "A", "pitch_standard": "modern"}, "pitch standard"),
	({"axiom": "A", "pitch_standard": 0}, "positive frequency"),
	({"axiom": "A", "bpm": 0}, "bpm"),
])
def test_invalid_values (data: dict, message: str) -> None:

	"""Invalid values raise ValueError naming the problem."""

	with pytest.raises(ValueError, match=message):
		music_generator.config.VoiceConfig.from_dict(data)
