"""L-system grammar elements and string rewriting.

An :class:`Axiom` is an ordered list of single-character :class:`Atom`
symbols. A :class:`RuleSet` holds single-symbol productions, and
:meth:`Axiom.apply_ruleset` performs one generation of classic L-system
rewriting: every atom is replaced simultaneously, based on the sequence as it
was before the pass.

Example:
	```python
	axiom = Axiom.from_string("FL")
	ruleset = RuleSet.from_strings(["L->L+KF", "K->FL-K"])

	axiom.apply_ruleset(ruleset)  # FL+KF
	axiom.apply_ruleset(ruleset)  # FL+KF+FL-KF
	```
"""

import dataclasses
import logging
import typing


logger = logging.getLogger(__name__)

RULE_SEPARATOR = "->"


class RepresentationError (Exception):

	"""
	Raised when the text form of an atom, axiom or rule is malformed.
	"""

	def __init__ (self, message: str) -> None:

		self.message = message

		super().__init__(
			f"There was an Error with the Representation of an L-System Element: {message}."
		)


@dataclasses.dataclass(frozen=True, order=True)
class Atom:

	"""
	A single grammar symbol.
	"""

	symbol: str


	@classmethod
	def from_string (cls, string_representation: str) -> "Atom":

		"""Create an atom from a string holding exactly one character.

		Raises:
			RepresentationError: If the string is empty or longer than one character.
		"""

		if not string_representation:
			raise RepresentationError("Atom is empty")

		if len(string_representation) > 1:
			raise RepresentationError("Atom contains more than one character")

		return cls(symbol=string_representation)


	def __repr__ (self) -> str:

		return self.symbol


	def __str__ (self) -> str:

		return self.symbol


class Axiom:

	"""
	An ordered sequence of atoms that can be rewritten by rules.
	"""

	def __init__ (self, atoms: typing.Iterable[Atom]) -> None:

		"""
		Initialize an axiom from atoms. Use :meth:`from_string` for text input.
		"""

		self.atom_list: typing.List[Atom] = list(atoms)

		if not self.atom_list:
			raise RepresentationError("Axiom is empty")


	@classmethod
	def from_string (cls, string_representation: str) -> "Axiom":

		"""Create an axiom with one atom per character.

		Parameters:
			string_representation: Non-empty string of symbols (e.g. ``"ABA"``).

		Raises:
			RepresentationError: If the string is empty.

		Example:
			```python
			str(Axiom.from_string("ABA"))  # "ABA"
			```
		"""

		if not string_representation:
			raise RepresentationError("Axiom is empty")

		return cls(Atom(symbol=character) for character in string_representation)


	def apply (self, rule: "Rule") -> None:

		"""
		Replace every atom matching the rule's left-hand side with its replacement.
		"""

		new_atom_list: typing.List[Atom] = []

		for atom in self.atom_list:

			if atom == rule.lhs:
				new_atom_list.extend(rule.rhs.atom_list)

			else:
				new_atom_list.append(atom)

		self.atom_list = new_atom_list


	def apply_ruleset (self, ruleset: "RuleSet") -> None:

		"""Rewrite the axiom for one generation.

		Each atom with a matching rule is replaced by the rule's full
		replacement, all others are kept. Replacements are never rewritten again
		within the same call, so this is exactly one L-system generation.
		Loop to apply several generations (or use :func:`expand`).
		"""

		new_atom_list: typing.List[Atom] = []

		for atom in self.atom_list:

			replacement = ruleset.get(atom)

			if replacement is None:
				new_atom_list.append(atom)

			else:
				new_atom_list.extend(replacement.atom_list)

		self.atom_list = new_atom_list


	def atoms (self) -> typing.Iterator[Atom]:

		"""
		Iterate over the atoms in order.
		"""

		return iter(self.atom_list)


	def copy (self) -> "Axiom":

		"""
		Return an independent axiom with the same atoms.
		"""

		return Axiom(self.atom_list)


	def __iter__ (self) -> typing.Iterator[Atom]:

		return iter(self.atom_list)


	def __len__ (self) -> int:

		return len(self.atom_list)


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Axiom):
			return NotImplemented

		return self.atom_list == other.atom_list


	def __str__ (self) -> str:

		return "".join(atom.symbol for atom in self.atom_list)


	def __repr__ (self) -> str:

		return str(self)


@dataclasses.dataclass(frozen=True)
class Rule:

	"""
	A production replacing one atom with a non-empty axiom.
	"""

	lhs: Atom
	rhs: Axiom


	@classmethod
	def from_string (cls, string_representation: str) -> "Rule":

		"""Parse a rule of the form ``"<symbol>-><replacement>"``.

		Whitespace around either side is ignored.

		Raises:
			RepresentationError: If the separator is missing or repeated, the
				left side is not exactly one character, or the right side is empty.

		Example:
			```python
			rule = Rule.from_string("A -> ABA")
			str(rule)  # "A->ABA"
			```
		"""

		separator_count = string_representation.count(RULE_SEPARATOR)

		if separator_count == 0:
			raise RepresentationError(f"Rule didn't contain a '{RULE_SEPARATOR}'")

		if separator_count > 1:
			raise RepresentationError(f"Rule contains more than one '{RULE_SEPARATOR}'")

		lhs_str, rhs_str = string_representation.split(RULE_SEPARATOR)

		return cls(
			lhs = Atom.from_string(lhs_str.strip()),
			rhs = Axiom.from_string(rhs_str.strip())
		)


	def __hash__ (self) -> int:

		return hash((self.lhs, str(self.rhs)))


	def __str__ (self) -> str:

		return f"{self.lhs}{RULE_SEPARATOR}{self.rhs}"


class RuleSet:

	"""
	Productions indexed by their left-hand atom, applied together in one pass.
	"""

	def __init__ (self, rules: typing.Dict[Atom, Axiom]) -> None:

		self.rules = rules


	@classmethod
	def from_rules (cls, rule_list: typing.Iterable[Rule]) -> "RuleSet":

		"""Index rules by their left-hand atom.

		Raises:
			RepresentationError: If two rules share a left-hand atom. The message
				names the duplicated symbol.
		"""

		rules: typing.Dict[Atom, Axiom] = {}

		for rule in rule_list:

			if rule.lhs in rules:
				raise RepresentationError(
					f"RuleSet contains two Rules with the lhs-Atom '{rule.lhs}'"
				)

			rules[rule.lhs] = rule.rhs

		return cls(rules)


	@classmethod
	def from_strings (cls, rule_strings: typing.Iterable[str]) -> "RuleSet":

		"""
		Parse each rule text with :meth:`Rule.from_string` and index the result.
		"""

		return cls.from_rules(Rule.from_string(rule_string) for rule_string in rule_strings)


	def get (self, atom: Atom) -> typing.Optional[Axiom]:

		"""
		Return the replacement for an atom, or None when no rule matches.
		"""

		return self.rules.get(atom)


	def __contains__ (self, atom: object) -> bool:

		return atom in self.rules


	def __len__ (self) -> int:

		return len(self.rules)


	def __str__ (self) -> str:

		return ", ".join(
			f"{lhs}{RULE_SEPARATOR}{rhs}" for lhs, rhs in sorted(self.rules.items(), key=lambda item: item[0])
		)


def expand (axiom: Axiom, ruleset: RuleSet, generations: int) -> Axiom:

	"""Return a new axiom rewritten for a number of generations.

	The input axiom is left untouched. The length of the result can grow
	exponentially with ``generations``, so callers should keep it small.

	Parameters:
		axiom: Seed axiom.
		ruleset: Productions applied in each generation.
		generations: Number of rewriting passes (0 returns a copy).

	Raises:
		ValueError: If ``generations`` is negative.
	"""

	if generations < 0:
		raise ValueError("Generations cannot be negative")

	result = axiom.copy()

	for generation in range(generations):
		result.apply_ruleset(ruleset)
		logger.debug(f"Generation {generation + 1}: {len(result)} atoms")

	return result
