"""Diagonal and DiagonalArena: the lazily evaluated Levenshtein cost matrix.

The classic dynamic-programming matrix is represented by its diagonals
instead of its rows.  Diagonal ``k`` holds the cells ``(i, i + k)``; the
main diagonal (``k == 0``) starts at the top-left corner and the final
distance lives on diagonal ``len(b) - len(a)``.

Each diagonal is an append-only cache that is extended only when a value
is requested.  Extending a cell needs at most three neighbours::

        a  b  c  d
    a   .  .  .  .      C:  current cell
    b   .  TL T  .      L:  cell to the left of C
    c   .  L  C  .      TL: cell to the top-left of C
    d   .  .  .  .      T:  cell above C

``L`` lives on the diagonal one step closer to the main diagonal and ``T``
on the one one step further away.  If ``L < TL`` then ``T >= L``, so ``T``
is never evaluated and diagonals further out than the true distance are
never created.  That gives ``O(|a| * Dist(a, b))`` time, or
``O(|a| * threshold)`` with a threshold.

Diagonals below the main one are stored with ``left`` and ``top``
swapped, i.e. as the upper half of the transposed matrix, so one
``Diagonal`` class serves both halves.  The swap happens once, when the
arena creates diagonal ``-1``.

All diagonals of a query live in a ``DiagonalArena`` keyed by index.
Neighbours are referenced by index (``closer_index`` / ``further_index``),
never by direct object references.

Reference: L. Allison, "Lazy Dynamic-Programming can be Eager",
Inf. Proc. Letters 43(4) pp207-212, 1992.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from lazy_levenshtein.algorithm.config import THRESHOLD_EXCEEDED, DiagonalSide

__all__ = ["Diagonal", "DiagonalArena", "InvariantViolation"]


class InvariantViolation(RuntimeError):
    """Raised when the diagonal bookkeeping is inconsistent.

    This is always a defect in the algorithm itself, never a user error,
    and is never caught inside the package.
    """


class Diagonal:
    """One diagonal of the cost matrix with its lazily grown cache.

    Attributes:
        index: Signed offset from the main diagonal.
        left: Row sequence in this diagonal's orientation.
        top: Column sequence in this diagonal's orientation.
        threshold: Values above it short-circuit to ``THRESHOLD_EXCEEDED``.
        cache: Computed distances, ``cache[0] == abs(index)``.
        closer_index: Arena key of the neighbour nearer the main diagonal.
        further_index: Arena key of the neighbour further from it.
    """

    __slots__ = (
        "_arena",
        "cache",
        "closer_index",
        "further_index",
        "index",
        "left",
        "threshold",
        "top",
    )

    def __init__(
        self,
        arena: DiagonalArena,
        left: Sequence[Any],
        top: Sequence[Any],
        closer_index: int | None,
        index: int,
        threshold: int,
    ) -> None:
        if abs(index) > len(top):
            msg = f"diagonal {index} lies outside a matrix with {len(top)} columns"
            raise InvariantViolation(msg)

        self._arena = arena
        self.index = index
        self.left = left
        self.top = top
        self.threshold = threshold
        self.closer_index = closer_index
        self.further_index: int | None = None

        # First cost on a diagonal is the distance from the matrix edge.
        self.cache: list[int] = [abs(index)]

    def __repr__(self) -> str:
        return (
            f"Diagonal(index={self.index}, computed={len(self.cache)}, "
            f"last_position={self.last_position})"
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def side(self) -> DiagonalSide:
        """Half of the matrix this diagonal belongs to."""
        return DiagonalSide.of(self.index)

    @property
    def last_position(self) -> int:
        """Highest valid position on this diagonal."""
        return min(len(self.left), len(self.top) - abs(self.index))

    @property
    def is_exhausted(self) -> bool:
        """True once a cached value already exceeds the threshold."""
        return self.cache[-1] > self.threshold

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def get_closer(self) -> Diagonal:
        """Return the neighbour nearer the main diagonal, creating it if needed.

        Only the main diagonal may create its closer neighbour (diagonal -1);
        every other diagonal received its closer neighbour at construction.
        """
        if self.closer_index is not None:
            return self._arena[self.closer_index]
        if self.index != 0:
            msg = f"diagonal {self.index} has no closer neighbour"
            raise InvariantViolation(msg)
        return self._arena.create_below_main()

    def get_further(self) -> Diagonal:
        """Return the neighbour further from the main diagonal, creating it if needed."""
        if self.further_index is not None:
            return self._arena[self.further_index]
        return self._arena.create_further(self)

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def get(self, position: int) -> int:
        """Return the distance at ``position``, computing missing cells first.

        Missing neighbour cells are resolved through an explicit stack of
        ``(diagonal, position)`` requests instead of recursion, so the call
        depth stays constant however many diagonals a query touches.

        Args:
            position: Zero-based position along the diagonal.

        Returns:
            The edit distance of the cell, or ``THRESHOLD_EXCEEDED`` as soon
            as a value on this diagonal exceeds the threshold.

        Raises:
            InvariantViolation: ``position`` is outside the diagonal.
        """
        self._check_position(position)

        if position < len(self.cache):
            return self.cache[position]

        # Values never decrease along a diagonal.
        if self.is_exhausted:
            return THRESHOLD_EXCEEDED

        pending: list[tuple[Diagonal, int]] = [(self, position)]
        while pending:
            diagonal, target = pending[-1]
            if target < len(diagonal.cache) or diagonal.is_exhausted:
                pending.pop()
                continue
            missing = diagonal._extend()
            if missing is not None:
                pending.append(missing)

        if position < len(self.cache) and self.cache[position] <= self.threshold:
            return self.cache[position]
        return THRESHOLD_EXCEEDED

    def _peek(self, position: int) -> int | None:
        """Return the value at ``position`` if known without computing, else None."""
        self._check_position(position)
        if position < len(self.cache):
            return self.cache[position]
        if self.is_exhausted:
            return THRESHOLD_EXCEEDED
        return None

    def _check_position(self, position: int) -> None:
        if not 0 <= position <= self.last_position:
            msg = (
                f"position {position} outside diagonal {self.index} "
                f"(valid: 0..{self.last_position})"
            )
            raise InvariantViolation(msg)

    def _extend(self) -> tuple[Diagonal, int] | None:
        """Compute and cache the next cell of this diagonal.

        Returns:
            ``None`` once the cell is cached, otherwise the neighbour
            ``(diagonal, position)`` that has to be computed first.
        """
        position = len(self.cache)
        top_left = self.cache[position - 1]

        if self.left[position - 1] == self.top[abs(self.index) + position - 1]:
            # A match can never cost more than the top-left cell.
            value = top_left
        else:
            closer = self.get_closer()
            closer_position = position - 1 if self.index == 0 else position
            left = closer._peek(closer_position)
            if left is None:
                return closer, closer_position
            if left < top_left:
                value = left + 1
            else:
                further = self.get_further()
                top = further._peek(position - 1)
                if top is None:
                    return further, position - 1
                value = 1 + min(top_left, top)

        self.cache.append(value)
        return None


class DiagonalArena:
    """Owner of every diagonal touched by one query.

    The main diagonal is created with the arena; all others are created on
    demand through ``Diagonal.get_closer`` / ``Diagonal.get_further``.

    Example::

        arena = DiagonalArena("kitten", "sitting", threshold=THRESHOLD_EXCEEDED)
        arena.main.get_further().get(6)   # 3
    """

    def __init__(self, left: Sequence[Any], top: Sequence[Any], threshold: int) -> None:
        self.left = left
        self.top = top
        self.threshold = threshold
        self._diagonals: dict[int, Diagonal] = {
            0: Diagonal(self, left, top, None, 0, threshold)
        }

    def __getitem__(self, index: int) -> Diagonal:
        try:
            return self._diagonals[index]
        except KeyError:
            msg = f"diagonal {index} was never created"
            raise InvariantViolation(msg) from None

    def __contains__(self, index: object) -> bool:
        return index in self._diagonals

    def __len__(self) -> int:
        return len(self._diagonals)

    def __iter__(self) -> Iterator[Diagonal]:
        for index in sorted(self._diagonals):
            yield self._diagonals[index]

    @property
    def main(self) -> Diagonal:
        return self._diagonals[0]

    def indices(self) -> list[int]:
        """Sorted indices of all live diagonals."""
        return sorted(self._diagonals)

    def create_below_main(self) -> Diagonal:
        """Create diagonal -1, the first one below the main diagonal.

        It is stored transposed: the main diagonal's ``top`` becomes its
        ``left`` and vice versa.
        """
        main = self.main
        if main.closer_index is not None:
            msg = "diagonal -1 already exists"
            raise InvariantViolation(msg)

        below = Diagonal(self, main.top, main.left, 0, -1, self.threshold)
        self._diagonals[-1] = below
        main.closer_index = -1
        return below

    def create_further(self, diagonal: Diagonal) -> Diagonal:
        """Create the neighbour one step further from the main diagonal."""
        if diagonal.further_index is not None:
            msg = f"diagonal {diagonal.index} already has a further neighbour"
            raise InvariantViolation(msg)

        index = diagonal.index + 1 if diagonal.index >= 0 else diagonal.index - 1
        further = Diagonal(
            self, diagonal.left, diagonal.top, diagonal.index, index, self.threshold
        )
        self._diagonals[index] = further
        diagonal.further_index = index
        return further
