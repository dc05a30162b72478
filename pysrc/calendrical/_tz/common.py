"""How a local time (in epoch seconds) maps onto a zone's offsets.

All values are plain integers: epoch seconds and offsets in seconds.
``before`` and ``after`` always refer to the offsets on either side of
the transition, in time-line order.
"""

from typing import Union


class Unambiguous:
    offset: int

    __slots__ = ("offset",)

    def __init__(self, offset: int):
        self.offset = offset

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Unambiguous):
            return self.offset == other.offset
        return False  # pragma: no cover

    def __repr__(self) -> str:
        return f"Unambiguous({self.offset})"


class _Transition:
    # The exact moment of the transition, in UTC epoch seconds
    transition: int
    before: int
    after: int

    __slots__ = ("transition", "before", "after")

    def __init__(self, transition: int, before: int, after: int):
        self.transition = transition
        self.before = before
        self.after = after

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            assert isinstance(other, _Transition)
            return (
                self.transition == other.transition
                and self.before == other.before
                and self.after == other.after
            )
        return False  # pragma: no cover

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"({self.transition}, {self.before}, {self.after})"
        )


class Gap(_Transition):
    """The local time is skipped: clocks jump forward by ``after - before``"""

    __slots__ = ()


class Fold(_Transition):
    """The local time occurs twice: clocks jump back by ``before - after``"""

    __slots__ = ()


Ambiguity = Union[Unambiguous, Gap, Fold]
