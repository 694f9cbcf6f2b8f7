"""Result model for predicate-bounded batch reads."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Batch(BaseModel, Generic[T]):
    """Elements consumed by a single batch read.

    ``eos`` is set only when the scan ran off the end of the sequence
    without its stop condition firing. ``elements`` then holds whatever
    was consumed on the way there, which may be nothing.
    """

    elements: list[T] = Field(default_factory=list)
    eos: bool = False

    def __len__(self) -> int:
        return len(self.elements)

    def __bool__(self) -> bool:
        return bool(self.elements)
