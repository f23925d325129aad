"""Pitch standards: the frequency of A4 in Hz.

Values follow the Oxford Composer Companion: J.S. Bach, pp. 369-372.
Pass one of these as the ``pitch_standard`` of a Key::

	import music_generator.constants.pitch_standards as standards

	key = Key(tonic, ScaleKind.MAJOR, standards.BAROQUE_PITCH)
"""

import typing

STUTTGART_PITCH = 440.0
BAROQUE_PITCH = 415.0
CHORTON_PITCH = 466.0
CLASSICAL_PITCH = 429.5         # 427-430

# Names accepted in configuration files.
PITCH_STANDARDS: typing.Dict[str, float] = {
	"stuttgart": STUTTGART_PITCH,
	"baroque": BAROQUE_PITCH,
	"chorton": CHORTON_PITCH,
	"classical": CLASSICAL_PITCH,
}
