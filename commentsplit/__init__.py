"""
commentsplit
============

Keeps the code changes of a revision and drops its comment-only and
whitespace-only edits. Meant to run as a merge tool during a version-control
split: the left tree is the prior revision, the right tree is rewritten in
place so it carries only the real changes.

Modules:
    - utils: Line classification (comment/blank detection, inline comments).
    - engine: LCS alignment with a pluggable line equality.
    - reconciler: Hunk segmentation and the keep/discard/restore policy.
    - merger: File-level merge and new-file filtering.
    - tree_controller: Per-path reconciliation of two directory trees.
    - models: Alignment operations, hunks and normalized text.
"""
from .merger import filter_new_file, merge_keeping_code, normalize
from .tree_controller import TreeController
from .utils import CommentClassifier

is_comment_or_blank = CommentClassifier.is_comment_or_blank

__all__ = [
    "CommentClassifier",
    "TreeController",
    "filter_new_file",
    "is_comment_or_blank",
    "merge_keeping_code",
    "normalize",
]
