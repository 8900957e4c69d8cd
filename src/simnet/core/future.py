"""Always-ready futures and result sequences for address resolution."""

from __future__ import annotations

from enum import Enum
from typing import Generator, Iterable, Iterator

from simnet.core.address import ResolvedAddress


class ConsumedError(RuntimeError):
    """Raised when a deferred result is observed more than once."""

    pass


class SequenceKind(str, Enum):
    """Backing form of a result sequence."""

    ONE = "one"
    MORE = "more"


class OneOrMore:
    """
    Finite, non-restartable iterator over resolved addresses.

    Backed either by at most one address or by a copied list of
    addresses. Both forms behave the same for consumers.
    """

    def __init__(self, kind: SequenceKind, items: list[ResolvedAddress]) -> None:
        self._kind = kind
        self._items = items
        self._pos = 0

    @classmethod
    def one(cls, address: ResolvedAddress | None) -> OneOrMore:
        """Sequence over a single optional address."""
        items = [address] if address is not None else []
        return cls(SequenceKind.ONE, items)

    @classmethod
    def more(cls, addresses: Iterable[ResolvedAddress]) -> OneOrMore:
        """Sequence over a copy of *addresses*, in order."""
        return cls(SequenceKind.MORE, list(addresses))

    @property
    def kind(self) -> SequenceKind:
        return self._kind

    def size_hint(self) -> tuple[int, int | None]:
        """Return (lower, upper) bounds on the remaining element count."""
        remaining = len(self._items) - self._pos
        return remaining, remaining

    def __iter__(self) -> Iterator[ResolvedAddress]:
        return self

    def __next__(self) -> ResolvedAddress:
        if self._pos >= len(self._items):
            raise StopIteration
        item = self._items[self._pos]
        self._pos += 1
        return item

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __repr__(self) -> str:
        remaining = ", ".join(str(a) for a in self._items[self._pos :])
        return f"OneOrMore.{self._kind.value}([{remaining}])"


class Ready:
    """
    A future whose outcome is known at construction.

    Holds either a result sequence or an exception. Awaiting it never
    suspends. The outcome may be extracted exactly once; later attempts
    raise ConsumedError.
    """

    def __init__(
        self,
        value: OneOrMore | None = None,
        error: BaseException | None = None,
    ) -> None:
        if (value is None) == (error is None):
            raise ValueError("Ready requires exactly one of value or error")
        self._value = value
        self._error = error
        self._consumed = False

    @classmethod
    def ok(cls, value: OneOrMore) -> Ready:
        return cls(value=value)

    @classmethod
    def err(cls, error: BaseException) -> Ready:
        return cls(error=error)

    def done(self) -> bool:
        return True

    @property
    def consumed(self) -> bool:
        return self._consumed

    def exception(self) -> BaseException | None:
        """Return the carried error without consuming the outcome."""
        return self._error

    def result(self) -> OneOrMore:
        """Take the outcome: return the sequence or raise the carried error."""
        if self._consumed:
            raise ConsumedError("Deferred result already consumed")
        self._consumed = True
        value, error = self._value, self._error
        self._value = self._error = None
        if error is not None:
            raise error
        return value

    def __await__(self) -> Generator[None, None, OneOrMore]:
        return self.result()
        yield  # pragma: no cover

    def __repr__(self) -> str:
        if self._consumed:
            state = "consumed"
        elif self._error is not None:
            state = f"error={self._error!r}"
        else:
            state = f"value={self._value!r}"
        return f"Ready({state})"
