from typing import List, Sequence, Union
from .models import Delete, Equal, Hunk, Insert, Operation
from .utils import CommentClassifier

Segment = Union[Equal, Hunk]


class HunkReconciler:
    """
    Turns an alignment into output lines that keep code changes only.

    Args:
        keep_blank_lines (bool): When True, blank lines among inserted lines
            survive as empty lines. When False every comment-or-blank
            inserted line is dropped. Applies to hunks and to new files alike.
    """

    def __init__(self, keep_blank_lines: bool = True):
        self.keep_blank_lines = keep_blank_lines

    def segment(self, left: Sequence[str], right: Sequence[str],
                operations: Sequence[Operation]) -> List[Segment]:
        """
        Folds operations into Equal entries and maximal Hunk values.
        """
        segments = []
        current = None

        for op in operations:
            if isinstance(op, Equal):
                current = None
                segments.append(op)
                continue

            if current is None:
                current = Hunk()
                segments.append(current)
            if isinstance(op, Delete):
                current.deleted.append(left[op.left_index])
            elif isinstance(op, Insert):
                current.inserted.append(right[op.right_index])
            else:
                raise TypeError(f"Unknown alignment operation: {op!r}")
        return segments

    def resolve_equal(self, left_line: str, right_line: str) -> str:
        if left_line.rstrip() == right_line.rstrip():
            return left_line
        # Only a comment differs: keep the code, drop the comment.
        return CommentClassifier.strip_inline_comment(left_line)

    def filter_lines(self, lines: Sequence[str]) -> List[str]:
        """
        Drops full-line comments and strips inline comments from code.

        Blank lines become "" (or "\\r" on a CRLF line) or are dropped,
        depending on keep_blank_lines.
        """
        out = []
        for line in lines:
            if CommentClassifier.is_blank(line):
                if self.keep_blank_lines:
                    out.append("\r" if line.endswith("\r") else "")
                continue
            if CommentClassifier.is_comment_or_blank(line):
                continue
            out.append(CommentClassifier.strip_inline_comment(line))
        return out

    def is_comment_only(self, hunk: Hunk) -> bool:
        return all(CommentClassifier.is_comment_or_blank(line) for line in hunk.inserted)

    def resolve_hunk(self, hunk: Hunk) -> List[str]:
        """
        Decides which lines of a hunk survive.

        - Comment-only insertion (no inserted code): every deleted line comes
          back and nothing inserted is kept.
        - Real change: deleted comments and blanks come back, deleted code
          stays deleted, inserted lines go through filter_lines.
        """
        if self.is_comment_only(hunk):
            return list(hunk.deleted)

        out = [line for line in hunk.deleted if CommentClassifier.is_comment_or_blank(line)]
        out.extend(self.filter_lines(hunk.inserted))
        return out

    def reconcile(self, left: Sequence[str], right: Sequence[str],
                  operations: Sequence[Operation]) -> List[str]:
        out = []
        for seg in self.segment(left, right, operations):
            if isinstance(seg, Equal):
                out.append(self.resolve_equal(left[seg.left_index], right[seg.right_index]))
            else:
                out.extend(self.resolve_hunk(seg))
        return out
