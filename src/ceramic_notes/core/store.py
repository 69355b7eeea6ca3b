"""State container applying actions through the reducer, in dispatch order."""

from collections import deque
from collections.abc import Callable

from loguru import logger

from ceramic_notes.core.reducer import reduce
from ceramic_notes.models.actions import Action
from ceramic_notes.models.state import State

Listener = Callable[[State, Action], None]


class Store:
    """Holds the current state; the reducer is its only writer.

    Actions dispatched while another action is being applied (for example
    from a listener) are queued and applied afterwards, first in, first out.
    A failing listener is logged and does not stop the queue from draining.
    """

    def __init__(self, initial: State | None = None) -> None:
        self._state = initial if initial is not None else State()
        self._queue: deque[Action] = deque()
        self._listeners: list[Listener] = []
        self._draining = False

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state, action)`` after every applied action."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> State:
        """Queue ``action`` and apply everything queued; return the resulting state."""
        self._queue.append(action)
        if self._draining:
            return self._state

        self._draining = True
        try:
            while self._queue:
                current = self._queue.popleft()
                self._state = reduce(self._state, current)
                logger.debug("Applied {}", type(current).__name__)
                for listener in list(self._listeners):
                    try:
                        listener(self._state, current)
                    except Exception:
                        logger.opt(exception=True).warning(
                            "Listener failed on {}", type(current).__name__
                        )
        finally:
            self._draining = False
        return self._state
