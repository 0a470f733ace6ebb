"""Synchronous keyed event emitter.

Listeners are stored per key in registration order and called synchronously
by :meth:`EventEmitter.dispatch`.  Each dispatch round iterates over a copy of
the key's listeners taken before the first call, so listeners may register,
unregister, reset or dispatch again from inside a round:

- a listener added during a round first runs on the next dispatch of its key;
- a listener removed during a round still runs in that round if it was part
  of the copy;
- a once-listener removes itself before calling the user callback, so it
  runs at most once even when that callback re-dispatches the same key.

Nothing is caught: the first listener that raises ends the round and its
exception reaches the ``dispatch`` caller unchanged.
"""

from __future__ import annotations

import functools
import types
from collections.abc import Callable, Hashable, Iterator
from typing import Any, TypeVar, overload

from emitkit.config.logging import get_logger
from emitkit.core.keys import Token

logger = get_logger(__name__)

T = TypeVar("T")
F = TypeVar("F")

_ALL = object()


def _same_listener(stored: Any, listener: Any) -> bool:
    """Reference identity; a bound method matches a fresh one of the same
    function on the same instance."""
    if stored is listener:
        return True
    return (
        isinstance(stored, types.MethodType)
        and isinstance(listener, types.MethodType)
        and stored.__self__ is listener.__self__
        and stored.__func__ is listener.__func__
    )


def _index_of(listeners: list[Any], listener: Any) -> int | None:
    for index, stored in enumerate(listeners):
        if _same_listener(stored, listener):
            return index
    return None


class EventEmitter:
    """Registry mapping keys to ordered, duplicate-free listener lists.

    Keys are any hashable value.  Strings and numbers address channels by
    value (``"1"`` and ``1`` are different channels); a :class:`Token`
    addresses a channel by identity.  A key is present only while it has at
    least one listener.

    All mutating methods return the emitter for chaining::

        emitter = (
            EventEmitter()
            .register("user:created", on_user_created)
            .register_once("ready", on_ready)
        )
        emitter.dispatch("user:created", {"id": 1, "name": "Alice"})
    """

    def __init__(self) -> None:
        self._listeners: dict[Hashable, list[Any]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @overload
    def register(self, key: Token[T], listener: Callable[[T], object]) -> EventEmitter: ...
    @overload
    def register(self, key: Hashable, listener: Any) -> EventEmitter: ...

    def register(self, key: Hashable, listener: Any) -> EventEmitter:
        """Add *listener* to *key* unless that same reference is already there.

        *listener* is not validated here.  A non-callable value is stored and
        fails with ``TypeError`` when a dispatch reaches it.
        """
        listeners = self._listeners.get(key)
        if listeners is None:
            self._listeners[key] = [listener]
        elif _index_of(listeners, listener) is None:
            listeners.append(listener)
        else:
            logger.debug("emitter.register_duplicate", key=key, listener=listener)
            return self

        logger.debug("emitter.register", key=key, listener=listener)
        return self

    @overload
    def register_once(
        self, key: Token[T], listener: Callable[[T], object]
    ) -> EventEmitter: ...
    @overload
    def register_once(self, key: Hashable, listener: Any) -> EventEmitter: ...

    def register_once(self, key: Hashable, listener: Any) -> EventEmitter:
        """Register *listener* for the next dispatch of *key* only.

        The stored entry is a wrapper, not *listener* itself, so
        ``unregister(key, listener)`` cannot remove it; ``unregister(key)``
        and :meth:`reset` can.  Each call creates a new wrapper: registering
        the same callable twice this way delivers the next payload twice.
        """

        def once_wrapper(payload: Any) -> None:
            self.unregister(key, once_wrapper)
            listener(payload)

        if callable(listener):
            functools.update_wrapper(once_wrapper, listener, updated=())
        else:
            once_wrapper.__wrapped__ = listener  # type: ignore[attr-defined]

        logger.debug("emitter.register_once", key=key, listener=listener)
        return self.register(key, once_wrapper)

    def listens_to(self, key: Hashable, *, once: bool = False) -> Callable[[F], F]:
        """Decorator form of :meth:`register` / :meth:`register_once`.

        The decorated function is returned unchanged::

            @emitter.listens_to("saved")
            def refresh(payload): ...
        """

        def decorator(listener: F) -> F:
            if once:
                self.register_once(key, listener)
            else:
                self.register(key, listener)
            return listener

        return decorator

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    @overload
    def unregister(self, key: Hashable) -> EventEmitter: ...
    @overload
    def unregister(self, key: Hashable, listener: Any) -> EventEmitter: ...

    def unregister(self, key: Hashable, listener: Any = _ALL) -> EventEmitter:
        """Remove *listener* from *key*, or every listener of *key* if omitted.

        Listeners are matched by reference, so an equal but distinct callable
        does not remove a stored one.  Unknown keys and listeners are ignored;
        ``None`` is looked up as a stored listener, not as "every listener".
        """
        if listener is _ALL:
            removed = self._listeners.pop(key, None)
            logger.debug(
                "emitter.unregister_key",
                key=key,
                removed=len(removed) if removed else 0,
            )
            return self

        listeners = self._listeners.get(key)
        if listeners is None:
            logger.debug("emitter.unregister_missing", key=key, listener=listener)
            return self

        index = _index_of(listeners, listener)
        if index is None:
            logger.debug("emitter.unregister_missing", key=key, listener=listener)
            return self
        del listeners[index]

        if not listeners:
            del self._listeners[key]
        logger.debug("emitter.unregister", key=key, listener=listener)
        return self

    def reset(self) -> EventEmitter:
        """Forget every key and listener.  Nothing is invoked."""
        dropped = len(self._listeners)
        self._listeners.clear()
        logger.debug("emitter.reset", keys=dropped)
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    @overload
    def dispatch(self, key: Token[T], payload: T) -> EventEmitter: ...
    @overload
    def dispatch(self, key: Hashable, payload: Any = None) -> EventEmitter: ...

    def dispatch(self, key: Hashable, payload: Any = None) -> EventEmitter:
        """Call every listener of *key* with *payload*, in registration order.

        The payload is passed as is; a listener that mutates it is seen by the
        listeners after it.  Dispatching a key without listeners is a no-op.
        """
        snapshot = tuple(self._listeners.get(key, ()))
        logger.debug("emitter.dispatch", key=key, listeners=len(snapshot))
        for listener in snapshot:
            listener(payload)
        return self

    # Short names.
    on = register
    once = register_once
    off = unregister
    emit = dispatch
    clear = reset

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def keys(self) -> list[Hashable]:
        """Keys that currently have listeners, in first-registration order."""
        return list(self._listeners)

    def listeners(self, key: Hashable) -> tuple[Any, ...]:
        """Copy of the listeners stored for *key* (empty if absent)."""
        return tuple(self._listeners.get(key, ()))

    def listener_count(self, key: Hashable) -> int:
        return len(self._listeners.get(key, ()))

    def __contains__(self, key: object) -> bool:
        return key in self._listeners

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._listeners))

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        # An emitter with no keys is still a usable emitter.
        return True

    def __repr__(self) -> str:
        return f"<EventEmitter keys={len(self._listeners)}>"
