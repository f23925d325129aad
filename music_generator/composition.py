"""Assemble a voice from a :class:`~music_generator.config.VoiceConfig`.

``build_voice`` wires the whole pipeline: parse the axiom and rules, expand
the axiom, build the key in the chosen temperament, map every symbol with a
:class:`~music_generator.simple_action.SimpleAction` and interpret the result.
"""

import logging
import typing

import music_generator.action
import music_generator.config
import music_generator.key
import music_generator.l_system
import music_generator.simple_action
import music_generator.temperament
import music_generator.tones
import music_generator.voice


logger = logging.getLogger(__name__)

TEMPERAMENT_FACTORIES: typing.Dict[str, music_generator.key.TemperamentFactory] = {
	"equal": music_generator.temperament.EqualTemperament,
	"just": music_generator.temperament.JustIntonation,
}


def simple_atom_types (
	axiom: music_generator.l_system.Axiom,
	action: music_generator.action.Action
) -> typing.Dict[music_generator.l_system.Atom, music_generator.action.AtomType]:

	"""
	Give every distinct atom of an axiom to the same action.
	"""

	atom_type = music_generator.action.has_action(action)

	return {atom: atom_type for atom in axiom}


def build_key (config: music_generator.config.VoiceConfig) -> music_generator.key.Key:

	"""Build the key described by a config.

	Raises:
		KeyCreationError: If the temperament cannot tune the scale.
	"""

	return music_generator.key.Key(
		tonic = music_generator.tones.Tone.from_string(config.tonic),
		scale_kind = music_generator.tones.ScaleKind(config.scale_kind),
		pitch_standard = config.pitch_standard,
		temperament_factory = TEMPERAMENT_FACTORIES[config.temperament]
	)


def build_voice (config: music_generator.config.VoiceConfig) -> music_generator.voice.Voice:

	"""Run the full pipeline for one voice.

	Raises:
		RepresentationError: For malformed axioms or rules.
		KeyCreationError: If the key cannot be tuned.
		ActionError: If a symbol cannot be turned into a note or rest.
	"""

	axiom = music_generator.l_system.Axiom.from_string(config.axiom)
	ruleset = music_generator.l_system.RuleSet.from_strings(config.rules)

	logger.info(f"Expanding {axiom} with {{{ruleset}}} for {config.generations} generations")

	expanded = music_generator.l_system.expand(axiom, ruleset, config.generations)

	key = build_key(config)
	action = music_generator.simple_action.SimpleAction(key)

	return music_generator.voice.Voice.from_axiom(expanded, simple_atom_types(expanded, action))
