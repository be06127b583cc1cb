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
import asyncio
import inspect
from typing import Callable, Dict, List, Any, Optional
from collections import defaultdict
import logging

__all__ = ('EventEmitter',)

logger = logging.getLogger(__name__)


class EventEmitter:
    """
    Notification sink for players and queues.

    ``emit`` runs synchronously: plain listeners are called in registration
    order before it returns, coroutine listeners are scheduled on the running
    loop and never awaited. A failing listener is logged and skipped, so the
    emitting side never sees its exceptions.
    """

    __slots__ = ('_listeners', '_once_listeners', '_max_listeners')

    def __init__(self, max_listeners: int = 100):
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)
        self._once_listeners: Dict[str, List[Callable]] = defaultdict(list)
        self._max_listeners = max_listeners

    def _register(self, bucket: Dict[str, List[Callable]], event: str, listener: Callable) -> bool:
        if self.listener_count(event) >= self._max_listeners:
            logger.warning(f"Listener limit ({self._max_listeners}) reached for '{event}', ignoring")
            return False
        bucket[event].append(listener)
        return True

    def on(self, event: str, listener: Callable) -> bool:
        """Register a persistent listener."""
        return self._register(self._listeners, event, listener)

    def once(self, event: str, listener: Callable) -> bool:
        """Register a listener that is dropped after its first call."""
        return self._register(self._once_listeners, event, listener)

    def off(self, event: str, listener: Optional[Callable] = None) -> None:
        """Remove one listener, or every listener of ``event`` when none is given."""
        if listener is None:
            self._listeners.pop(event, None)
            self._once_listeners.pop(event, None)
            return

        for bucket in (self._listeners, self._once_listeners):
            listeners = bucket.get(event)
            if listeners and listener in listeners:
                listeners.remove(listener)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> None:
        listeners = list(self._listeners.get(event, ())) + self._once_listeners.pop(event, [])

        for listener in listeners:
            try:
                if inspect.iscoroutinefunction(listener):
                    self._schedule(event, listener(*args, **kwargs))
                else:
                    listener(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in event listener for '{event}': {e}", exc_info=True)

    @staticmethod
    def _schedule(event: str, coro) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            logger.error(f"No running event loop for async listener of '{event}'")
            return
        loop.create_task(coro)

    def remove_all_listeners(self, event: Optional[str] = None) -> None:
        if event is None:
            self._listeners.clear()
            self._once_listeners.clear()
        else:
            self._listeners.pop(event, None)
            self._once_listeners.pop(event, None)

    def listener_count(self, event: str) -> int:
        return (len(self._listeners.get(event, ())) +
                len(self._once_listeners.get(event, ())))

    def event_names(self) -> List[str]:
        names = {e for e, l in self._listeners.items() if l}
        names.update(e for e, l in self._once_listeners.items() if l)
        return sorted(names)
