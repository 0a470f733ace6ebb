"""Port definitions.

Consumers that only publish or subscribe should depend on :class:`Emitter`
rather than on the concrete :class:`~emitkit.core.emitter.EventEmitter`.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol, overload, runtime_checkable


# ---------------------------------------------------------------------------
# Emitter port
# ---------------------------------------------------------------------------


@runtime_checkable
class Emitter(Protocol):
    """Synchronous keyed publish/subscribe registry."""

    def register(self, key: Hashable, listener: Callable[[Any], object]) -> Emitter: ...
    def register_once(self, key: Hashable, listener: Callable[[Any], object]) -> Emitter: ...
    @overload
    def unregister(self, key: Hashable) -> Emitter: ...
    @overload
    def unregister(self, key: Hashable, listener: Any) -> Emitter: ...
    def dispatch(self, key: Hashable, payload: Any = None) -> Emitter: ...
    def reset(self) -> Emitter: ...
