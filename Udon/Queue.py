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
import logging
import math
import random

from .Errors import InvalidPosition
from .Events import Events

__all__ = ('Queue',)

logger = logging.getLogger(__name__)


def _duration(track):
  length = getattr(track, 'length', 0)
  if isinstance(length, bool) or not isinstance(length, (int, float)):
    return 0
  if not math.isfinite(length) or length < 0:
    return 0
  return length


def _isPosition(position):
  return isinstance(position, int) and not isinstance(position, bool)


class Queue:
  """
  Pending tracks of a player plus the track that is playing right now.

  ``current`` is never part of the pending list and is left alone by every
  mutator except ``add``. ``previous`` is history filled in by the player.
  Each successful mutation emits ``Events.QueueUpdate`` with
  ``(player, queue)`` exactly once before returning.
  """

  def __init__(self, player, emitter=None, rng=None):
    self.player = player
    self.emitter = emitter if emitter is not None else player.emitter
    self.rng = rng if rng is not None else random.Random()
    self.current = None
    self.previous = []
    self._q = []

  @property
  def size(self):
    """Number of pending tracks, current excluded."""
    return len(self._q)

  @property
  def totalSize(self):
    """Pending tracks plus the current one, if any."""
    return len(self._q) + (1 if self.current is not None else 0)

  @property
  def isEmpty(self):
    return not self._q

  @property
  def durationLength(self):
    """Summed length of pending tracks. The current track is not counted."""
    return sum(_duration(t) for t in self._q)

  @property
  def tracks(self):
    return list(self._q)

  def add(self, track):
    """
    Add one track or a list of tracks.

    With nothing playing, the first track of a list becomes ``current`` and
    the rest is queued. A single track in that situation only becomes
    ``current`` and no update is emitted.
    """
    if isinstance(track, (list, tuple)):
      tracks = list(track)
      if self.current is None and tracks:
        self.current = tracks.pop(0)
    elif self.current is None:
      self.current = track
      logger.debug(f"Set current track to {track!r}")
      return self
    else:
      tracks = [track]

    self._q.extend(tracks)
    logger.debug(f"Added {len(tracks)} track(s), {len(self._q)} pending")
    self.emitChanges()
    return self

  def addAt(self, track, position):
    """Insert a track at ``position``; ``position == size`` appends."""
    if not _isPosition(position) or position < 0 or position > len(self._q):
      raise InvalidPosition(f"Invalid position {position}. Must be between 0 and {len(self._q)}")

    self._q.insert(position, track)
    logger.debug(f"Inserted {track!r} at {position}")
    self.emitChanges()
    return self

  def remove(self, position):
    if not _isPosition(position) or position < 0 or position >= len(self._q):
      raise InvalidPosition(f"Position must be between 0 and {len(self._q) - 1}")

    removed = self._q.pop(position)
    logger.debug(f"Removed {removed!r} from {position}")
    self.emitChanges()
    return self

  def shuffle(self):
    """Fisher-Yates shuffle of the pending tracks."""
    q = self._q
    for i in range(len(q) - 1, 0, -1):
      j = self.rng.randrange(i + 1)
      q[i], q[j] = q[j], q[i]
    logger.debug(f"Shuffled {len(q)} pending tracks")
    self.emitChanges()
    return self

  def clear(self):
    """Drop every pending track. ``current`` and ``previous`` are kept."""
    self._q.clear()
    logger.debug("Cleared pending tracks")
    self.emitChanges()
    return self

  def peek(self, index=0):
    if 0 <= index < len(self._q):
      return self._q[index]
    return None

  def emitChanges(self):
    self.emitter.emit(Events.QueueUpdate, self.player, self)

  def __len__(self):
    return len(self._q)

  def __bool__(self):
    return len(self._q) > 0

  def __iter__(self):
    return iter(list(self._q))

  def __getitem__(self, index):
    # slices come back as a new list
    return self._q[index]

  def __repr__(self):
    return f"Queue(size={len(self._q)}, current={self.current!r})"
