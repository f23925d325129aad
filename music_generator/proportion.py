"""Exact whole-number proportions for just intonation.

A :class:`Proportion` ``a:b`` relates a lower tone to a higher one the way a
string-length ratio does: scaling a frequency by ``8:9`` raises it by a major
whole tone (``x * 9 / 8``). Composition ("fusion") stays in integer
arithmetic so that long chains of intervals never drift.
"""

import math
import typing


class Proportion:

	"""
	A ratio of two positive integers, compared by its reduced form.
	"""

	def __init__ (self, magnitude_a: int, magnitude_b: int) -> None:

		"""Store the magnitudes and their gcd-reduced form.

		Raises:
			ValueError: If either magnitude is not positive.
		"""

		if magnitude_a <= 0 or magnitude_b <= 0:
			raise ValueError(f"Proportion magnitudes must be positive, got {magnitude_a}:{magnitude_b}")

		self.magnitude_a = magnitude_a
		self.magnitude_b = magnitude_b

		divisor = math.gcd(magnitude_a, magnitude_b)

		self.magnitude_a_norm = magnitude_a // divisor
		self.magnitude_b_norm = magnitude_b // divisor


	def fusion (self, other: "Proportion") -> "Proportion":

		"""Compose two proportions by multiplying their magnitudes.

		Example:
			```python
			str(Proportion(2, 3).fusion(Proportion(3, 4)))  # "6:12"
			Proportion(2, 3).fusion(Proportion(3, 4)) == Proportion(1, 2)  # True
			```
		"""

		return Proportion(self.magnitude_a * other.magnitude_a, self.magnitude_b * other.magnitude_b)


	def invert (self) -> "Proportion":

		"""
		Return the proportion with its magnitudes swapped.
		"""

		return Proportion(self.magnitude_b, self.magnitude_a)


	def pow (self, exponent: int) -> "Proportion":

		"""Fuse the proportion with itself ``abs(exponent)`` times.

		Negative exponents invert first; ``pow(0)`` is the unit ``1:1``.
		"""

		base = self.invert() if exponent < 0 else self

		return Proportion(base.magnitude_a_norm ** abs(exponent), base.magnitude_b_norm ** abs(exponent))


	def scale (self, value: float) -> float:

		"""
		Multiply a value by ``b / a``.
		"""

		return value * self.magnitude_b_norm / self.magnitude_a_norm


	def normalized (self) -> typing.Tuple[int, int]:

		"""
		Return the reduced ``(a, b)`` pair.
		"""

		return self.magnitude_a_norm, self.magnitude_b_norm


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Proportion):
			return NotImplemented

		return self.normalized() == other.normalized()


	def __hash__ (self) -> int:

		return hash(self.normalized())


	def __str__ (self) -> str:

		return f"{self.magnitude_a}:{self.magnitude_b}"


	def __repr__ (self) -> str:

		return f"Proportion({self.magnitude_a}, {self.magnitude_b})"


UNIT = Proportion(1, 1)
OCTAVE_UP = Proportion(1, 2)
