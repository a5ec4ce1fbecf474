# logic/variables.py
# This file is part of Entail - A Propositional Argument Validator
#
# Ordered variable declarations and the mask-to-assignment mapping

"""Variable declarations for an argument.

A VariableSet fixes both the column order of the truth table and the bit
position of each variable in a row mask. Variable 0 is the most significant
bit, so the first declared variable changes slowest across rows:

    mask 0 -> (F, F, F)
    mask 1 -> (F, F, T)
    ...
    mask 7 -> (T, T, T)

Assignments are plain tuples of booleans aligned with the declaration order.
"""

from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from parser.lexer import tokenize
from parser.normalizer import normalize
from parser.tokens import Variable
from utils.logger import get_logger

from .exceptions import CapacityError, DuplicateVariableError, InvalidVariableNameError
from .limits import MAX_VARIABLES

Assignment = Tuple[bool, ...]


class VariableSet:
    """Ordered, duplicate-free collection of lowercase variable names.

    Args:
        names: Variable names in column order
        english: Reject names that English-mode normalization would turn
            into operators
        max_variables: Upper bound on the number of names

    Raises:
        CapacityError: Fewer than 1 or more than ``max_variables`` names
        DuplicateVariableError: A name is declared twice (case-insensitively)
        InvalidVariableNameError: A name does not lex as a single identifier
    """

    def __init__(
        self,
        names: Iterable[str],
        english: bool = False,
        max_variables: int = MAX_VARIABLES,
    ):
        ordered = []
        index: Dict[str, int] = {}
        for raw in names:
            name = raw.strip().lower()
            _check_name(raw, name, english)
            if name in index:
                raise DuplicateVariableError(f"Variable '{name}' declared more than once")
            index[name] = len(ordered)
            ordered.append(name)

        if not 1 <= len(ordered) <= max_variables:
            raise CapacityError(
                f"Expected between 1 and {max_variables} variables, got {len(ordered)}"
            )

        self._names: Tuple[str, ...] = tuple(ordered)
        self._index = index
        get_logger().debug(f"Declared variables: {', '.join(self._names)}")

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def row_count(self) -> int:
        """Number of distinct assignments (2^N)."""
        return 1 << len(self._names)

    def index_of(self, name: str) -> Optional[int]:
        """Column index of ``name``, or None if it was not declared."""
        return self._index.get(name)

    def assignment(self, mask: int) -> Assignment:
        """Assignment encoded by ``mask``; variable ``i`` reads bit ``N - 1 - i``.

        Raises:
            ValueError: ``mask`` is outside ``[0, 2^N)``
        """
        count = len(self._names)
        if not 0 <= mask < self.row_count:
            raise ValueError(f"Mask {mask} out of range for {count} variables")
        return tuple(bool((mask >> (count - 1 - i)) & 1) for i in range(count))

    def assignments(self) -> Iterator[Assignment]:
        """All assignments in ascending mask order."""
        for mask in range(self.row_count):
            yield self.assignment(mask)

    def bind(self, values: Mapping[str, bool]) -> Assignment:
        """Build an assignment from a name-to-value mapping.

        Raises:
            KeyError: A declared variable has no value, or an undeclared
                name is given
        """
        lowered = {name.lower(): bool(value) for name, value in values.items()}
        unknown = set(lowered) - set(self._index)
        if unknown:
            raise KeyError(f"Undeclared variables: {sorted(unknown)}")
        return tuple(lowered[name] for name in self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name) -> bool:
        return name in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariableSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"VariableSet({list(self._names)!r})"


def _check_name(raw: str, name: str, english: bool) -> None:
    # A usable name must come back from the lexer as exactly itself
    if tokenize(name) != (Variable(name),):
        raise InvalidVariableNameError(f"Invalid variable name: {raw!r}")
    if english and normalize(name, english=True).strip() != name:
        raise InvalidVariableNameError(
            f"'{name}' is rewritten in English mode and cannot name a variable"
        )
