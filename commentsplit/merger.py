"""
File-level entry points: normalize both texts, align, reconcile, reassemble.
"""
from typing import Optional
from .engine import LCSAligner
from .models import NormalizedText
from .reconciler import HunkReconciler
from .utils import CommentClassifier


def normalize(text: str) -> NormalizedText:
    """
    Splits text on "\\n" and records whether it ended with a newline.

    The empty element produced by the final newline is dropped, so
    `normalize(text).render() == text` always holds.
    """
    has_eol = text.endswith("\n")
    lines = text.split("\n")
    if has_eol:
        lines.pop()
    return NormalizedText(lines, has_eol)


def merge_keeping_code(left_text: Optional[str], right_text: str,
                       keep_blank_lines: bool = True) -> str:
    """
    Merges the candidate revision into the prior one, keeping code changes
    and suppressing comment-only and whitespace-only edits.

    Args:
        left_text (str, optional): Prior revision. None or "" means the file
            did not exist before.
        right_text (str): Candidate revision.
        keep_blank_lines (bool): Blank-line policy for inserted lines.

    Returns:
        str: The merged text. Uses the left side's trailing-newline
        convention when the left side has content, the right side's
        otherwise. Empty when no line survives.
    """
    right = normalize(right_text)
    if left_text:
        left = normalize(left_text)
        has_eol = left.has_trailing_newline
    else:
        left = NormalizedText([], right.has_trailing_newline)
        has_eol = right.has_trailing_newline

    aligner = LCSAligner(left.lines, right.lines,
                         CommentClassifier.cached_equality(left.lines, right.lines))
    reconciler = HunkReconciler(keep_blank_lines)
    out = reconciler.reconcile(left.lines, right.lines, aligner.align())

    if not out:
        return ""
    return NormalizedText(out, has_eol).render()


def filter_new_file(right_text: str, keep_blank_lines: bool = True) -> str:
    """
    Filters a file that only exists on the right: full-line comments go,
    inline comments are stripped, and the file keeps its own
    trailing-newline convention.
    """
    right = normalize(right_text)
    lines = HunkReconciler(keep_blank_lines).filter_lines(right.lines)
    return NormalizedText(lines, right.has_trailing_newline).render()
