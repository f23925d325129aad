"""Note names, accidentals, key signatures and diatonic scale spelling.

A :class:`Tone` is a note name plus an accidental (``"C"``, ``"F#"``,
``"Bb"``). Scales are spelled from key signatures rather than from semitone
arithmetic so that every degree keeps its own letter name: D-flat major is
``Db Eb F Gb Ab Bb C`` and C-sharp major is ``C# D# E# F# G# A# B#``.

Module-level tables:
- ``MAJOR_KEY_SIGNATURE``: every tonic spelling to its circle-of-fifths index
  (negative = flats, positive = sharps). Tonics that would need double
  accidentals are respelled to their enharmonic equivalent.
- ``RELATIVE_MAJOR``: every minor tonic spelling to the major key that shares
  its notes.
- ``SHARP_ORDER`` / ``FLAT_ORDER``: the order in which accidentals enter a key
  signature.
"""

import dataclasses
import enum
import typing


DEGREES_IN_SCALE = 7

# Rotating a major scale right by this many places starts it on its sixth
# degree, the tonic of the relative minor.
MINOR_ROTATION = 2


class NoteName (enum.Enum):

	"""
	The seven letter names, valued by their index from C.
	"""

	C = 0
	D = 1
	E = 2
	F = 3
	G = 4
	A = 5
	B = 6


	@property
	def index (self) -> int:

		return self.value


	@classmethod
	def from_index (cls, index: int) -> "NoteName":

		"""
		Return the note name at an index, wrapping modulo 7.
		"""

		return cls(index % DEGREES_IN_SCALE)


class Accidental (enum.Enum):

	"""
	Flat, natural or sharp, valued by their semitone offset.
	"""

	FLAT = -1
	NATURAL = 0
	SHARP = 1


	@property
	def symbol (self) -> str:

		return ACCIDENTAL_SYMBOLS[self]


ACCIDENTAL_SYMBOLS: typing.Dict[Accidental, str] = {
	Accidental.FLAT: "b",
	Accidental.NATURAL: "",
	Accidental.SHARP: "#",
}


class ScaleKind (enum.Enum):

	"""
	The diatonic scale shapes a key can be built on.
	"""

	MAJOR = "major"
	MINOR = "minor"


@dataclasses.dataclass(frozen=True)
class Tone:

	"""
	A note name with its accidental, e.g. F-sharp.
	"""

	note_name: NoteName
	accidental: Accidental = Accidental.NATURAL


	@classmethod
	def from_string (cls, string_representation: str) -> "Tone":

		"""Parse a tone such as ``"C"``, ``"C#"`` or ``"Gb"``.

		Raises:
			ValueError: If the string is not a letter A-G optionally followed by
				``#`` or ``b``.

		Example:
			```python
			Tone.from_string("F#")  # Tone(note_name=NoteName.F, accidental=Accidental.SHARP)
			```
		"""

		text = string_representation.strip()

		if 1 <= len(text) <= 2 and text[0] in NoteName.__members__:

			accidental_symbol = text[1:]

			for accidental, symbol in ACCIDENTAL_SYMBOLS.items():
				if accidental_symbol == symbol:
					return cls(note_name=NoteName[text[0]], accidental=accidental)

		raise ValueError(
			f"Unknown tone: {string_representation!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)


	def __str__ (self) -> str:

		return f"{self.note_name.name}{self.accidental.symbol}"


ALL_TONES: typing.List[Tone] = [
	Tone(note_name, accidental)
	for note_name in NoteName
	for accidental in (Accidental.FLAT, Accidental.NATURAL, Accidental.SHARP)
]

SHARP_ORDER: typing.List[NoteName] = [
	NoteName.F, NoteName.C, NoteName.G, NoteName.D, NoteName.A, NoteName.E, NoteName.B
]

FLAT_ORDER: typing.List[NoteName] = list(reversed(SHARP_ORDER))

# Major tonic -> (tonic the scale is spelled from, circle-of-fifths index).
# Keys needing double sharps or double flats use their enharmonic spelling,
# so indices stay within -7..7 (D# major would otherwise be index 9, G# 8).
MAJOR_KEY_SIGNATURE: typing.Dict[str, typing.Tuple[str, int]] = {
	"Cb": ("Cb", -7),
	"C":  ("C", 0),
	"C#": ("C#", 7),
	"Db": ("Db", -5),
	"D":  ("D", 2),
	"D#": ("Eb", -3),
	"Eb": ("Eb", -3),
	"E":  ("E", 4),
	"E#": ("F", -1),
	"Fb": ("E", 4),
	"F":  ("F", -1),
	"F#": ("F#", 6),
	"Gb": ("Gb", -6),
	"G":  ("G", 1),
	"G#": ("Ab", -4),
	"Ab": ("Ab", -4),
	"A":  ("A", 3),
	"A#": ("Bb", -2),
	"Bb": ("Bb", -2),
	"B":  ("B", 5),
	"B#": ("C", 0),
}

# Minor tonic -> major tonic sharing the same notes.
RELATIVE_MAJOR: typing.Dict[str, str] = {
	"Cb": "D",
	"C":  "Eb",
	"C#": "E",
	"Db": "E",
	"D":  "F",
	"D#": "F#",
	"Eb": "Gb",
	"E":  "G",
	"E#": "Ab",
	"Fb": "G",
	"F":  "Ab",
	"F#": "A",
	"Gb": "A",
	"G":  "Bb",
	"G#": "B",
	"Ab": "Cb",
	"A":  "C",
	"A#": "C#",
	"Bb": "Db",
	"B":  "D",
	"B#": "Eb",
}


@dataclasses.dataclass(frozen=True)
class KeySignature:

	"""
	The accidental a major key applies and the note names it applies to.
	"""

	tonic: Tone
	index: int
	accidental: Accidental
	affected: typing.Tuple[NoteName, ...]


def key_signature (tonic: Tone) -> KeySignature:

	"""Look up the key signature of the major key on a tonic.

	Parameters:
		tonic: Major tonic in any of its 21 spellings.

	Returns:
		A :class:`KeySignature` whose ``tonic`` is the spelling the scale is
		built from (differs from the input only for tonics such as ``G#``
		that would need double accidentals).

	Example:
		```python
		sig = key_signature(Tone.from_string("Eb"))
		sig.index     # -3
		sig.affected  # (NoteName.B, NoteName.E, NoteName.A)
		```
	"""

	spelled, index = MAJOR_KEY_SIGNATURE[str(tonic)]

	if index < 0:
		accidental = Accidental.FLAT
		affected = tuple(FLAT_ORDER[:-index])

	elif index > 0:
		accidental = Accidental.SHARP
		affected = tuple(SHARP_ORDER[:index])

	else:
		accidental = Accidental.NATURAL
		affected = ()

	return KeySignature(
		tonic = Tone.from_string(spelled),
		index = index,
		accidental = accidental,
		affected = affected
	)


def major_scale (tonic: Tone) -> typing.Tuple[Tone, ...]:

	"""Spell the seven degrees of the major scale on a tonic.

	Example:
		```python
		[str(t) for t in major_scale(Tone.from_string("D"))]
		# ['D', 'E', 'F#', 'G', 'A', 'B', 'C#']
		```
	"""

	signature = key_signature(tonic)
	start = signature.tonic.note_name.index
	scale: typing.List[Tone] = []

	for offset in range(DEGREES_IN_SCALE):

		note_name = NoteName.from_index(start + offset)

		if note_name in signature.affected:
			scale.append(Tone(note_name, signature.accidental))

		else:
			scale.append(Tone(note_name, Accidental.NATURAL))

	return tuple(scale)


def minor_scale (tonic: Tone) -> typing.Tuple[Tone, ...]:

	"""Spell the natural minor scale on a tonic.

	The relative major is spelled first and then rotated so its sixth degree
	becomes the first. Enharmonic tonics (``Gb`` and ``F#``) produce the same
	spelling.

	The first degree follows the relative major's spelling, which can differ
	from the tonic asked for: ``Gb`` minor starts on ``F#``.

	Example:
		```python
		[str(t) for t in minor_scale(Tone.from_string("A"))]
		# ['A', 'B', 'C', 'D', 'E', 'F', 'G']
		```
	"""

	relative_major = Tone.from_string(RELATIVE_MAJOR[str(tonic)])

	return rotate_right(major_scale(relative_major), MINOR_ROTATION)


def build_scale (tonic: Tone, scale_kind: ScaleKind) -> typing.Tuple[Tone, ...]:

	"""
	Spell the scale of the given kind on a tonic.
	"""

	if scale_kind is ScaleKind.MAJOR:
		return major_scale(tonic)

	if scale_kind is ScaleKind.MINOR:
		return minor_scale(tonic)

	raise ValueError(f"Unknown scale kind: {scale_kind!r}")


def rotate_right (items: typing.Sequence[Tone], shift: int) -> typing.Tuple[Tone, ...]:

	"""Cyclically rotate a sequence right by ``shift`` places.

	The element at index ``i`` moves to ``(i + shift) % len(items)``.
	"""

	n = len(items)

	return tuple(items[(i - shift) % n] for i in range(n))
