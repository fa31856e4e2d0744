import logging
import os
import shutil
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional
from .merger import filter_new_file, merge_keeping_code

logger = logging.getLogger(__name__)

INSTRUCTIONS_FILE = "JJ-INSTRUCTIONS"


def walk_files(root: str) -> Iterator[str]:
    """
    Yields the relative path ("/"-separated) of every regular file under root.
    Symlinks are skipped, so nothing is read or written through a link.
    """
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            abs_path = os.path.join(dirpath, name)
            if os.path.islink(abs_path) or not os.path.isfile(abs_path):
                continue
            rel = os.path.relpath(abs_path, root)
            yield rel.replace(os.sep, "/")


def read_text_if_exists(path: str) -> Optional[str]:
    """
    Reads a file as UTF-8 text. Undecodable bytes survive a read/write round
    trip. A missing file reads as None; any other I/O error propagates.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return None


def write_text(path: str, text: str):
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(text)


class FileAction(ABC):
    """Abstract base class for what happens to one relative path."""

    def __init__(self, keep_blank_lines: bool = True):
        self.keep_blank_lines = keep_blank_lines

    @abstractmethod
    def apply(self, left_path: str, right_path: str,
              left_text: Optional[str], right_text: Optional[str]) -> str:
        """
        Updates the right-hand file in place.

        Args:
            left_path (str): Absolute path on the left (prior) side.
            right_path (str): Absolute path on the right (candidate) side.
            left_text (str, optional): Left content, None if absent.
            right_text (str, optional): Right content, None if absent.

        Returns:
            str: The action tag that was taken, for diagnostics.
        """
        pass


class RestoreFileAction(FileAction):
    """The file was deleted on the right: copy the left file back."""

    def apply(self, left_path, right_path, left_text, right_text):
        os.makedirs(os.path.dirname(right_path), exist_ok=True)
        shutil.copyfile(left_path, right_path)
        return "restore-file"


class FilterNewFileAction(FileAction):
    """The file only exists on the right: strip its comments."""

    def apply(self, left_path, right_path, left_text, right_text):
        filtered = filter_new_file(right_text, self.keep_blank_lines)
        os.makedirs(os.path.dirname(right_path), exist_ok=True)
        write_text(right_path, filtered)
        return "filter-right-only"


class MergeFileAction(FileAction):
    """Both sides have the file: merge, and write only if something changed."""

    def apply(self, left_path, right_path, left_text, right_text):
        merged = merge_keeping_code(left_text, right_text, self.keep_blank_lines)
        if merged == right_text:
            return "unchanged"
        write_text(right_path, merged)
        return "merge"


class TreeController:
    """
    Reconciles a right-hand directory tree against a left-hand one, file by
    file, so that only code changes remain on the right.
    """

    def __init__(self, keep_blank_lines: bool = True,
                 instructions_file: str = INSTRUCTIONS_FILE):
        """
        Args:
            keep_blank_lines (bool): Blank-line policy passed to every merge.
            instructions_file (str): Relative path that is never touched.
        """
        self.keep_blank_lines = keep_blank_lines
        self.instructions_file = instructions_file

    def collect_paths(self, left: str, right: str) -> List[str]:
        """Sorted union of the relative file paths under both roots."""
        paths = set(walk_files(right))
        paths.update(walk_files(left))
        return sorted(paths)

    def process(self, left: str, right: str) -> Dict[str, str]:
        """
        Runs the per-file actions over both trees.

        Args:
            left (str): Root of the prior revision.
            right (str): Root of the candidate revision, updated in place.

        Returns:
            Dict[str, str]: {relative_path: action_tag} for every processed file.

        Raises:
            FileNotFoundError: A root does not exist.
            NotADirectoryError: A root is not a directory.
            OSError: Reading or writing a file failed.
        """
        self._check_root(left)
        self._check_root(right)

        actions = {}
        for rel in self.collect_paths(left, right):
            if rel == self.instructions_file:
                continue

            left_path = os.path.join(left, *rel.split("/"))
            right_path = os.path.join(right, *rel.split("/"))
            if os.path.islink(left_path) or os.path.islink(right_path):
                continue
            left_text = read_text_if_exists(left_path)
            right_text = read_text_if_exists(right_path)

            action = self._get_action(left_text, right_text)
            if action is None:
                continue
            tag = action.apply(left_path, right_path, left_text, right_text)
            logger.debug("[%s] %s", tag, rel)
            actions[rel] = tag
        return actions

    def _get_action(self, left_text: Optional[str], right_text: Optional[str]) -> Optional[FileAction]:
        if right_text is None and left_text is not None:
            return RestoreFileAction(self.keep_blank_lines)
        if left_text is None and right_text is not None:
            return FilterNewFileAction(self.keep_blank_lines)
        if left_text is not None and right_text is not None:
            return MergeFileAction(self.keep_blank_lines)
        return None

    def _check_root(self, root: str):
        if not os.path.exists(root):
            raise FileNotFoundError(f"Path does not exist: {root}")
        if not os.path.isdir(root):
            raise NotADirectoryError(f"Path is not a directory: {root}")
