"""YAML configuration for a single voice.

Example ``config.yaml``:

	```yaml
	voice:
	  axiom: "ABCD"
	  rules:
	    - "A->ABA"
	    - "B->CxC"
	  generations: 3
	  tonic: "F#"
	  scale_kind: "minor"
	  temperament: "just"
	  pitch_standard: "baroque"
	  bpm: 96
	```
"""

import dataclasses
import logging
import os
import typing

import yaml

import music_generator.constants.pitch_standards
import music_generator.tones


logger = logging.getLogger(__name__)

TEMPERAMENTS = ("equal", "just")


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def resolve_pitch_standard (value: typing.Union[str, int, float]) -> float:

	"""Return a pitch standard in Hz from a number or a standard's name.

	Raises:
		ValueError: For unknown names and non-positive frequencies.
	"""

	if isinstance(value, str):

		name = value.strip().lower()

		if name not in music_generator.constants.pitch_standards.PITCH_STANDARDS:
			known = ", ".join(sorted(music_generator.constants.pitch_standards.PITCH_STANDARDS))
			raise ValueError(f"Unknown pitch standard: '{value}'. Available: {known}")

		return music_generator.constants.pitch_standards.PITCH_STANDARDS[name]

	if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
		raise ValueError(f"Pitch standard must be a positive frequency, got {value!r}")

	return float(value)


@dataclasses.dataclass
class VoiceConfig:

	"""
	Everything needed to build one voice.

	Attributes:
		axiom: Start string of the L-system.
		rules: Rule texts such as ``"A->ABA"``.
		generations: Number of rewriting passes.
		tonic: Tonic spelling (``"C"``, ``"F#"``, ``"Bb"``).
		scale_kind: ``"major"`` or ``"minor"``.
		temperament: ``"equal"`` or ``"just"``.
		pitch_standard: Frequency of A4 in Hz.
		bpm: Tempo; one time unit lasts one beat.
	"""

	axiom: str
	rules: typing.List[str] = dataclasses.field(default_factory=list)
	generations: int = 3
	tonic: str = "C"
	scale_kind: str = "major"
	temperament: str = "equal"
	pitch_standard: float = music_generator.constants.pitch_standards.STUTTGART_PITCH
	bpm: float = 120


	@classmethod
	def from_dict (cls, data: typing.Dict[str, typing.Any]) -> "VoiceConfig":

		"""Build a validated config from the ``voice`` section of a config file.

		Raises:
			ValueError: If a value is missing, has the wrong type or names an
				unknown tonic, scale kind, temperament or pitch standard.
		"""

		try:
			return cls._from_dict(data)

		except ValueError as error:
			logger.error(f"Invalid voice config: {error}")
			raise


	@classmethod
	def _from_dict (cls, data: typing.Dict[str, typing.Any]) -> "VoiceConfig":

		axiom = data.get("axiom")

		if not isinstance(axiom, str) or not axiom:
			raise ValueError("Voice config needs a non-empty 'axiom'")

		rules = data.get("rules", [])

		if not isinstance(rules, list) or not all(isinstance(rule, str) for rule in rules):
			raise ValueError("'rules' must be a list of rule texts such as 'A->ABA'")

		generations = data.get("generations", 3)

		if isinstance(generations, bool) or not isinstance(generations, int) or generations < 0:
			raise ValueError(f"'generations' must be a non-negative integer, got {generations!r}")

		tonic = str(data.get("tonic", "C"))

		# Raises ValueError for unknown spellings.
		music_generator.tones.Tone.from_string(tonic)

		scale_kind = str(data.get("scale_kind", "major")).lower()

		if scale_kind not in [kind.value for kind in music_generator.tones.ScaleKind]:
			raise ValueError(f"Unknown scale kind: '{scale_kind}'. Available: major, minor")

		temperament = str(data.get("temperament", "equal")).lower()

		if temperament not in TEMPERAMENTS:
			raise ValueError(f"Unknown temperament: '{temperament}'. Available: {', '.join(TEMPERAMENTS)}")

		pitch_standard = resolve_pitch_standard(
			data.get("pitch_standard", music_generator.constants.pitch_standards.STUTTGART_PITCH)
		)

		bpm = data.get("bpm", 120)

		if isinstance(bpm, bool) or not isinstance(bpm, (int, float)) or bpm <= 0:
			raise ValueError(f"'bpm' must be positive, got {bpm!r}")

		return cls(
			axiom = axiom,
			rules = list(rules),
			generations = generations,
			tonic = tonic,
			scale_kind = scale_kind,
			temperament = temperament,
			pitch_standard = pitch_standard,
			bpm = bpm
		)
