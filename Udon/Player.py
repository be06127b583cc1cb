"""DO WHAT THE FUCK YOU WANT TO PUBLIC LICENSE
                    Version 2, December 2004

 Copyright (C) 2004 Sam Hocevar <sam@hocevar.net>

 Everyone is permitted to copy and distribute verbatim or modified
 copies of this license document, and changing it is allowed as long
 as the name is changed.

            DO WHAT THE FUCK YOU WANT TO PUBLIC LICENSE
   TERMS AND CONDITIONS FOR COPYING, DISTRIBUTION AND MODIFICATION

  0. You just DO WHAT THE FUCK YOU WANT TO.

URL: https://www.wtfpl.net/txt/copying/
"""
from typing import Optional, Dict, Any
import logging

from .Events import Events
from .Queue import Queue

__all__ = ('Player', 'DEFAULT_OPTIONS')

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    'maxPreviousSize': 10,
    'rng': None
}


class Player:
    """Owns a queue and decides what goes into its history."""

    __slots__ = ('emitter', 'opts', 'queue', '_maxPreviousSize', '__weakref__')

    def __init__(self, emitter, opts: Optional[Dict] = None):
        self.emitter = emitter
        self.opts = {**DEFAULT_OPTIONS, **(opts or {})}
        limit = self.opts['maxPreviousSize']
        if limit is None:
            limit = DEFAULT_OPTIONS['maxPreviousSize']
        self._maxPreviousSize: int = max(0, int(limit))
        self.queue = Queue(self, emitter, rng=self.opts['rng'])

    @property
    def current(self) -> Optional[Any]:
        return self.queue.current

    def emit(self, event: str, *args: Any) -> None:
        self.emitter.emit(event, *args)

    def _pushPrevious(self, track) -> None:
        previous = self.queue.previous
        previous.append(track)
        if len(previous) > self._maxPreviousSize:
            del previous[:len(previous) - self._maxPreviousSize]

    def next(self) -> Optional[Any]:
        """Move on to the next pending track, archiving the current one."""
        q = self.queue
        if q.current is not None:
            self._pushPrevious(q.current)

        if q.isEmpty:
            q.current = None
            logger.debug("Queue exhausted")
            self.emit(Events.QueueEnd, self)
            return None

        # current must be set before remove() notifies
        track = q.peek(0)
        q.current = track
        q.remove(0)
        self.emit(Events.TrackStart, self, track)
        return track

    def back(self) -> Optional[Any]:
        """Replay the most recent history entry. The current track goes back to the front."""
        q = self.queue
        if not q.previous:
            return None

        track = q.previous.pop()
        old = q.current
        q.current = track
        if old is not None:
            q.addAt(old, 0)
        self.emit(Events.TrackStart, self, track)
        return track

    def stop(self) -> None:
        self.queue.clear()
        self.queue.current = None
        self.emit(Events.PlayerStop, self)

    def __repr__(self):
        return f"Player(queue={self.queue!r})"
