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
__all__ = ('Track',)


class Track:
  """A playable item. The queue only ever reads ``length`` (milliseconds)."""

  __slots__ = ('encoded', 'title', 'author', 'length', 'uri', 'requester')

  def __init__(self, title='', author='', length=0, encoded=None, uri='', requester=None):
    self.encoded = encoded
    self.title = title
    self.author = author
    self.length = length
    self.uri = uri
    self.requester = requester

  @classmethod
  def fromPayload(cls, data, requester=None):
    """Build a track from a Lavalink-style ``{'encoded': ..., 'info': {...}}`` dict."""
    info = data.get('info') or data
    return cls(
      title=info.get('title', ''),
      author=info.get('author', ''),
      length=info.get('length') or 0,
      encoded=data.get('encoded') or data.get('track'),
      uri=info.get('uri', ''),
      requester=requester
    )

  @property
  def durationText(self):
    """Length formatted as M:SS."""
    total = int(self.length or 0) // 1000
    return f"{total // 60}:{total % 60:02d}"

  def __str__(self):
    return f"{self.title} by {self.author}"

  def __repr__(self):
    return f"Track(title='{self.title}', author='{self.author}', length={self.length})"
