"""Actions that turn grammar atoms into musical elements.

Each atom of an expanded axiom is given an :class:`AtomType` by the caller:

- ``NO_ACTION`` - the atom is skipped.
- ``has_action(action)`` - the action produces the next note or rest.
- ``PUSH_STACK`` / ``POP_STACK`` - save or restore the action state.

The action state is threaded explicitly: every call receives the current
state and returns the state to use next, so a state value is never mutated
behind the builder's back. :class:`NeutralActionState` carries nothing and
suits one-to-one mappings such as :class:`~music_generator.simple_action.SimpleAction`;
:class:`StackActionState` keeps a stack of values for bracketed grammars
(``F[+F]F``).
"""

import abc
import dataclasses
import enum
import typing

import music_generator.musical_element


class ErrorKind (enum.Enum):

	"""
	The ways building a voice from an axiom can fail.
	"""

	UNDEFINED_ATOM_TYPE = "The type of an atom is left undefined"
	POP_ON_EMPTY_STACK = "Tried to pop an empty state stack"
	GENERATION_ERROR = "General error while generating a MusicalElement"


class ActionError (Exception):

	"""
	Raised while interpreting an axiom; ``kind`` tells which step failed.
	"""

	def __init__ (self, kind: ErrorKind, message: typing.Optional[str] = None) -> None:

		self.kind = kind
		self.message = kind.value if message is None else message

		super().__init__(f"There was an Error while interpreting the Axiom: {self.message}.")


	@classmethod
	def from_error_kind (cls, kind: ErrorKind) -> "ActionError":

		"""
		Create an error with the standard message for its kind.
		"""

		return cls(kind)


	@classmethod
	def from_generation_error (cls, generation_error: Exception) -> "ActionError":

		"""Wrap an error raised while generating an element.

		The original error is kept as ``__cause__``.
		"""

		error = cls(ErrorKind.GENERATION_ERROR, str(generation_error))
		error.__cause__ = generation_error

		return error


StateType = typing.TypeVar("StateType", bound="ActionState")


class ActionState (abc.ABC):

	"""
	State shared by the actions of one voice build.
	"""

	@classmethod
	@abc.abstractmethod
	def get_neutral_state (cls: typing.Type[StateType]) -> StateType:

		"""Return the state a build starts from."""

		...

	@abc.abstractmethod
	def push (self: StateType) -> StateType:

		"""Return the state after saving the current one."""

		...

	@abc.abstractmethod
	def pop (self: StateType) -> StateType:

		"""Return the state after restoring the last saved one.

		Raises:
			ActionError: ``POP_ON_EMPTY_STACK`` if nothing was saved.
		"""

		...


class NeutralActionState (ActionState):

	"""
	A state that carries nothing; push and pop have no effect.
	"""

	@classmethod
	def get_neutral_state (cls) -> "NeutralActionState":

		return cls()


	def push (self) -> "NeutralActionState":

		return self


	def pop (self) -> "NeutralActionState":

		return self


	def __eq__ (self, other: object) -> bool:

		return isinstance(other, NeutralActionState)


	def __hash__ (self) -> int:

		return hash(NeutralActionState)


@dataclasses.dataclass(frozen=True)
class StackActionState (ActionState):

	"""A stack of values; the top of the stack is the current value.

	``push`` saves a copy of the current value, ``pop`` discards the current
	value and returns to the saved one. Subclasses set ``neutral_value`` to
	choose the value a build starts with.

	Example:
		```python
		state = StackActionState.get_neutral_state().with_current(3)
		state = state.push().with_current(5)
		state.current        # 5
		state.pop().current  # 3
		```
	"""

	stack: typing.Tuple[typing.Any, ...] = (None,)

	neutral_value: typing.ClassVar[typing.Any] = None


	@classmethod
	def get_neutral_state (cls) -> "StackActionState":

		return cls(stack=(cls.neutral_value,))


	@property
	def current (self) -> typing.Any:

		"""Return the value on top of the stack."""

		return self.stack[-1]


	@property
	def depth (self) -> int:

		"""Return the number of saved values below the current one."""

		return len(self.stack) - 1


	def with_current (self, value: typing.Any) -> "StackActionState":

		"""
		Return a state whose current value is replaced.
		"""

		return dataclasses.replace(self, stack=self.stack[:-1] + (value,))


	def push (self) -> "StackActionState":

		return dataclasses.replace(self, stack=self.stack + (self.current,))


	def pop (self) -> "StackActionState":

		if len(self.stack) <= 1:
			raise ActionError.from_error_kind(ErrorKind.POP_ON_EMPTY_STACK)

		return dataclasses.replace(self, stack=self.stack[:-1])


class Action (abc.ABC, typing.Generic[StateType]):

	"""
	Maps an atom's symbol to a musical element, possibly updating the state.
	"""

	@abc.abstractmethod
	def gen_next_musical_element (
		self,
		symbol: str,
		state: StateType
	) -> typing.Tuple[music_generator.musical_element.MusicalElement, StateType]:

		"""Return the element for a symbol and the state to continue with.

		Raises:
			ActionError: ``GENERATION_ERROR`` if no element can be produced.
		"""

		...


class AtomKind (enum.Enum):

	"""
	What the voice builder does with an atom.
	"""

	NO_ACTION = "no_action"
	HAS_ACTION = "has_action"
	PUSH_STACK = "push_stack"
	POP_STACK = "pop_stack"


@dataclasses.dataclass(frozen=True)
class AtomType:

	"""
	An atom's kind and, for ``HAS_ACTION``, the action that interprets it.
	"""

	kind: AtomKind
	action: typing.Optional[Action] = None


	def __post_init__ (self) -> None:

		if (self.kind is AtomKind.HAS_ACTION) != (self.action is not None):
			raise ValueError("An action is required for HAS_ACTION atoms and only for them")


def has_action (action: Action) -> AtomType:

	"""
	Return the atom type that hands its symbol to ``action``.
	"""

	return AtomType(kind=AtomKind.HAS_ACTION, action=action)


NO_ACTION = AtomType(kind=AtomKind.NO_ACTION)
PUSH_STACK = AtomType(kind=AtomKind.PUSH_STACK)
POP_STACK = AtomType(kind=AtomKind.POP_STACK)
