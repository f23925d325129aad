"""
music_generator - symbolic music from L-systems.

An axiom is rewritten by single-symbol production rules for a number of
generations; every symbol of the result is then mapped to a note or a rest
in a key. The output is a :class:`Voice`, a timed sequence of pitches in Hz
that any synthesizer or MIDI writer can render.

What it covers:

- **L-systems.** Axioms, rules and rule sets parsed from text
  (``"A->ABA"``), rewritten in parallel one generation at a time.
- **Key signatures and spelling.** Major and minor scales spelled from the
  circle of fifths, so D-flat major is ``Db Eb F Gb Ab Bb C`` while
  C-sharp major is ``C# D# E# F# G# A# B#``.
- **Tuning.** Twelve-tone equal temperament and just intonation built from
  exact whole-number ratios, relative to a pitch standard (A4 = 440 Hz,
  baroque 415 Hz, ...).
- **Actions.** A small state machine interprets each symbol; the default
  :class:`SimpleAction` maps ``A``-``Z`` and ``a``-``w`` to 49 consecutive
  scale degrees and ``x`` to a rest.

Minimal example:

	```python
	import music_generator

	axiom = music_generator.Axiom.from_string("ABCD")
	rules = music_generator.RuleSet.from_strings(["A->ABA", "B->CxC"])
	expanded = music_generator.expand(axiom, rules, 3)

	key = music_generator.Key(
		music_generator.Tone.from_string("F#"),
		music_generator.ScaleKind.MINOR,
		440.0,
		music_generator.JustIntonation
	)
	action = music_generator.SimpleAction(key)

	voice = music_generator.Voice.from_axiom(
		expanded,
		music_generator.simple_atom_types(expanded, action)
	)
	events = voice.sequence(bpm=120)
	```

Package-level exports: ``Axiom``, ``RuleSet``, ``expand``, ``Tone``,
``ScaleKind``, ``Key``, ``EqualTemperament``, ``JustIntonation``,
``SimpleAction``, ``Voice``, ``simple_atom_types``, ``build_voice``.
"""

import music_generator.composition
import music_generator.key
import music_generator.l_system
import music_generator.simple_action
import music_generator.temperament
import music_generator.tones
import music_generator.voice


Axiom = music_generator.l_system.Axiom
RuleSet = music_generator.l_system.RuleSet
expand = music_generator.l_system.expand
Tone = music_generator.tones.Tone
ScaleKind = music_generator.tones.ScaleKind
Key = music_generator.key.Key
EqualTemperament = music_generator.temperament.EqualTemperament
JustIntonation = music_generator.temperament.JustIntonation
SimpleAction = music_generator.simple_action.SimpleAction
Voice = music_generator.voice.Voice
simple_atom_types = music_generator.composition.simple_atom_types
build_voice = music_generator.composition.build_voice
