"""Line comment scanner mixin."""

from __future__ import annotations


class CommentScannerMixin:
    """Mixin providing `;` line comment skipping."""

    _source: bytes
    _source_len: int

    def _skip_comment(self, pos: int) -> int:
        """Skip from the `;` at pos up to (not including) the next newline.

        Returns:
            Position of the newline, or end of source.
        """
        idx = self._source.find(b"\n", pos)
        return idx if idx != -1 else self._source_len
