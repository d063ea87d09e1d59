"""Line reassembly for chunked process output."""

import re
from typing import Final

_LINE_BREAK: Final = re.compile(r"\r?\n")


class LineBuffer:
    """Split arbitrarily chunked text into complete lines.

    The trailing fragment of each chunk is held back until a later chunk
    completes it, so a line split across reads is emitted once, whole.
    Both ``\\n`` and ``\\r\\n`` terminate a line, including a ``\\r\\n``
    pair that straddles two chunks.

    Example:
        >>> buffer = LineBuffer()
        >>> buffer.push("On bra")
        []
        >>> buffer.push("nch main\\r\\nYour")
        ['On branch main']
        >>> buffer.flush()
        'Your'
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: str = ""

    def push(self, chunk: str) -> list[str]:
        """Add a chunk and return the lines it completed.

        Args:
            chunk: Text as received from the stream.

        Returns:
            Complete lines, without their terminators, in arrival order.
        """
        if not chunk:
            return []
        parts = _LINE_BREAK.split(self._pending + chunk)
        self._pending = parts.pop()
        return parts

    def flush(self) -> str | None:
        """Release the unterminated trailing fragment at end of stream.

        Returns:
            The fragment, or None if the stream ended on a line break.
        """
        fragment, self._pending = self._pending, ""
        return fragment or None

    @property
    def pending(self) -> str:
        """Return the text held back waiting for a line break."""
        return self._pending
