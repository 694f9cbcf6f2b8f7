"""Cursor that reads an in-memory sequence one element or one batch at a time.

The cursor references the sequence it was given and never copies or mutates
it. Reads only move the position forward. Running out of elements is a normal
outcome: ``read_one`` reports it through its ``ok`` flag and batch reads set
``Batch.eos``. Only ``read_or_raise`` turns it into an exception.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Generic, TypeVar

from slicereader.errors import EndOfSequence
from slicereader.models import Batch

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[T], bool]


class SliceReader(Generic[T]):
    """Forward-only reader over a sequence, similar to a file reader over bytes.

    Not safe for concurrent use; callers sharing a reader between threads
    must synchronize access themselves. The caller keeps ownership of the
    sequence and must not mutate it while reading.
    """

    def __init__(self, elements: Sequence[T]) -> None:
        self._elements = elements
        self._position = 0

    @property
    def position(self) -> int:
        """Offset of the next unread element."""
        return self._position

    def remaining_count(self) -> int:
        """Number of elements not yet read."""
        return self.total_count() - self._position

    def total_count(self) -> int:
        """Length of the underlying sequence. Unaffected by reads."""
        return len(self._elements)

    def __len__(self) -> int:
        return self.remaining_count()

    def __repr__(self) -> str:
        return f"SliceReader(position={self._position}, total={self.total_count()})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value, ok = self.read_one()
        if not ok:
            raise StopIteration
        return value  # type: ignore[return-value]

    # -- Single reads --

    def read_one(self) -> tuple[T | None, bool]:
        """Read the next element.

        Returns ``(element, True)`` and advances, or ``(None, False)`` once the
        sequence is exhausted. Check the flag rather than the value, since
        ``None`` is a legal element.
        """
        if self._position >= self.total_count():
            return None, False
        element = self._elements[self._position]
        self._position += 1
        return element, True

    def read_or_raise(self) -> T:
        """Read the next element, raising EndOfSequence if there is none."""
        value, ok = self.read_one()
        if not ok:
            raise EndOfSequence(self._position)
        return value  # type: ignore[return-value]

    # -- Batch reads --

    def read_while(self, predicate: Predicate[T]) -> Batch[T]:
        """Read elements while the predicate holds.

        The first element failing the predicate is left unread.
        """
        return self._scan(predicate, stop_on=False, inclusive=False, op="read_while")

    def read_until(self, predicate: Predicate[T]) -> Batch[T]:
        """Read elements until the predicate holds.

        The first element satisfying the predicate is left unread.
        """
        return self._scan(predicate, stop_on=True, inclusive=False, op="read_until")

    def read_while_inclusive(self, predicate: Predicate[T]) -> Batch[T]:
        """Like read_while, but also consumes the element that failed the predicate."""
        return self._scan(
            predicate, stop_on=False, inclusive=True, op="read_while_inclusive"
        )

    def read_until_inclusive(self, predicate: Predicate[T]) -> Batch[T]:
        """Like read_until, but also consumes the element that satisfied the predicate."""
        return self._scan(
            predicate, stop_on=True, inclusive=True, op="read_until_inclusive"
        )

    def _scan(
        self,
        predicate: Predicate[T],
        *,
        stop_on: bool,
        inclusive: bool,
        op: str,
    ) -> Batch[T]:
        """Consume elements until ``predicate(element) == stop_on`` or the end.

        The position is only advanced after the predicate returns, so an
        exception from the predicate leaves the failing element unread.
        """
        consumed: list[T] = []
        while self._position < self.total_count():
            element = self._elements[self._position]
            if bool(predicate(element)) == stop_on:
                if inclusive:
                    consumed.append(element)
                    self._position += 1
                return Batch(elements=consumed)
            consumed.append(element)
            self._position += 1

        logger.debug(
            "%s: reached end of sequence after %d element(s)", op, len(consumed)
        )
        return Batch(elements=consumed, eos=True)
