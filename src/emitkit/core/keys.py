"""Opaque event keys.

String and numeric keys address channels by value. A :class:`Token`
addresses a channel by identity: two tokens are never equal to each other
(unless they are the same object), nor to any string or number, whatever
their description says.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Token(Generic[T]):
    """A unique event key, optionally tied to a payload type.

    The type parameter only informs static checkers::

        ready: Token[dict[str, int]] = Token("ready")
        emitter.register(ready, handle_ready)  # handle_ready(payload: dict[str, int])
    """

    __slots__ = ("_description",)

    def __init__(self, description: str = "") -> None:
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"Token({self._description!r})"

    def __str__(self) -> str:
        return self._description

    # Identity, never value.
    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)
