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
__all__ = ('UdonError', 'InvalidPosition')


class UdonError(Exception):
    """Base error for Udon. Carries a numeric ``code`` next to the message."""

    code = 0

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class InvalidPosition(UdonError):
    """Raised when a queue index falls outside the valid range."""

    code = 1

    def __init__(self, message: str):
        super().__init__(InvalidPosition.code, message)
