"""Growable text buffer."""

from __future__ import annotations

import io


class StringBuilder:
    """Accumulates text and supports truncation."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()

    def add_string(self, text: str | None, length: int = 0) -> None:
        """Append ``text``, or only its first ``length`` characters if nonzero."""
        if not text:
            return
        if length:
            text = text[:length]
        self._buffer.write(text)

    def truncate(self, length: int) -> None:
        """Shorten the contents to ``length`` characters; longer lengths do nothing."""
        if length >= len(self):
            return
        self._buffer.seek(length)
        self._buffer.truncate(length)

    def clear(self) -> None:
        """Remove all contents."""
        self.truncate(0)

    def peek(self) -> str:
        """Return the current contents."""
        return self._buffer.getvalue()

    def dump(self) -> str:
        """Return a copy of the current contents."""
        return str(self._buffer.getvalue())

    def __len__(self) -> int:
        return self._buffer.tell()