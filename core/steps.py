# core/steps.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Append-only ordered log of rewrite descriptions

"""Step recorder holding the trace of one expression's simplification.

A recorder is created per expression, filled only by the rewrite engine and
then handed to the caller read-only. Insertion order is the order in which
laws were applied; indices stay valid until the recorder is disposed.
"""

from typing import Iterator, List, Tuple

from .exceptions import IndexOutOfRange


class StepRecorder:
    """Ordered, append-only sequence of step descriptions."""

    __slots__ = ("_steps", "_disposed")

    def __init__(self):
        self._steps: List[str] = []
        self._disposed = False

    def append(self, description: str) -> None:
        """Record one step at the end of the trace.

        Raises:
            RuntimeError: If the recorder has been disposed
        """
        if self._disposed:
            raise RuntimeError("Cannot append to a disposed step recorder")
        self._steps.append(str(description))

    def count(self) -> int:
        return len(self._steps)

    def at(self, index: int) -> str:
        """Return the description recorded at index.

        Negative indices are not supported.

        Raises:
            IndexOutOfRange: If index is not in ``0 <= index < count()``
        """
        if not 0 <= index < len(self._steps):
            raise IndexOutOfRange(index, len(self._steps))
        return self._steps[index]

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._steps)

    def dispose(self) -> None:
        """Release all held descriptions. The recorder is empty afterwards."""
        self._steps.clear()
        self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._steps))

    def __repr__(self) -> str:
        return f"StepRecorder({list(self._steps)!r})"
