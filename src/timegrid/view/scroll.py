# SPDX-License-Identifier: MIT

import logging
from types import TracebackType
from typing import Callable, Optional

from timegrid.model.timeline import LabelGroup
from timegrid.service.sticky import select_sticky_index, sticky_label

logger = logging.getLogger(__name__)

ScrollListener = Callable[[float], None]


class ScrollEvents:
    """Minimal scroll-offset source that the presentation layer feeds."""

    def __init__(self, scroll_left: float = 0) -> None:
        self.scroll_left = scroll_left
        self._listeners: list[ScrollListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ScrollListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ScrollListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, scroll_left: float) -> None:
        self.scroll_left = scroll_left
        for listener in list(self._listeners):
            listener(scroll_left)


class StickyTracker:
    """
    Keeps the sticky label index in step with a scroll source.

    The tracker subscribes on attach and evaluates the current offset
    straight away, then unsubscribes on detach. It can be used as a context
    manager so the listener never outlives the view that owns it.
    """

    def __init__(self, groups: list[LabelGroup]) -> None:
        self.groups = groups
        self.index = 0
        self._events: Optional[ScrollEvents] = None

    @property
    def label(self) -> str:
        return sticky_label(self.index, self.groups)

    @property
    def attached(self) -> bool:
        return self._events is not None

    def attach(self, events: ScrollEvents) -> None:
        if self._events is not None:
            raise RuntimeError("StickyTracker is already attached")
        self._events = events
        events.subscribe(self.handle_scroll)
        self.handle_scroll(events.scroll_left)

    def detach(self) -> None:
        if self._events is None:
            return
        self._events.unsubscribe(self.handle_scroll)
        self._events = None

    def handle_scroll(self, scroll_left: float) -> int:
        index = select_sticky_index(scroll_left, self.groups)
        if index != self.index:
            logger.debug("sticky label moved to %d at offset %s", index, scroll_left)
        self.index = index
        return index

    def __enter__(self) -> "StickyTracker":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.detach()
