"""Active-heading tracking driven by viewport intersection events"""

import logging
from typing import Callable, Iterable, Optional, Union

from mdview.core.models import HeadingEntry


logger = logging.getLogger(__name__)

Listener = Callable[[Optional[str]], None]


class ActiveHeadingTracker:
    """Keeps the id of the heading currently in view.

    Each update() batch sets the first intersecting known heading as active;
    headings leaving the viewport never clear it. Listeners are called only
    when the active id changes.
    """

    def __init__(self, headings: Iterable[Union[HeadingEntry, str]] = ()):
        self._ids: list[str] = []
        self._active: Optional[str] = None
        self._listeners: list[Listener] = []
        self._detached = False
        self.reset(headings)

    @property
    def active(self) -> Optional[str]:
        return self._active

    @property
    def heading_ids(self) -> list[str]:
        return list(self._ids)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def update(self, events: Iterable[tuple[str, bool]]) -> Optional[str]:
        if self._detached:
            return self._active
        for heading_id, is_intersecting in events:
            if is_intersecting and heading_id in self._ids:
                self._set(heading_id)
                break
        return self._active

    def select(self, heading_id: str) -> None:
        """Anchor navigation: make heading_id active immediately."""
        if not self._detached and heading_id in self._ids:
            self._set(heading_id)

    def reset(self, headings: Iterable[Union[HeadingEntry, str]]) -> None:
        """Replace the observed headings after a content change."""
        self._ids = [h.id if isinstance(h, HeadingEntry) else h for h in headings]
        self._detached = False
        if self._active is not None and self._active not in self._ids:
            self._set(None)

    def detach(self) -> None:
        """Stop observing: drop listeners and state; later events are ignored."""
        self._listeners.clear()
        self._ids = []
        self._active = None
        self._detached = True

    def _set(self, heading_id: Optional[str]) -> None:
        if heading_id == self._active:
            return
        self._active = heading_id
        logger.debug("active heading: %s", heading_id)
        for listener in list(self._listeners):
            listener(heading_id)
