from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Equal:
    """
    Left line `left_index` and right line `right_index` carry the same code.

    Attributes:
        left_index (int): 0-based index into the left (prior) lines.
        right_index (int): 0-based index into the right (candidate) lines.
    """
    left_index: int
    right_index: int


@dataclass(frozen=True)
class Delete:
    """Left line `left_index` has no counterpart on the right."""
    left_index: int


@dataclass(frozen=True)
class Insert:
    """Right line `right_index` has no counterpart on the left."""
    right_index: int


Operation = Union[Equal, Delete, Insert]


@dataclass
class Hunk:
    """
    A maximal run of non-Equal operations.

    Attributes:
        deleted (List[str]): Left lines removed in this run, in order.
        inserted (List[str]): Right lines added in this run, in order.
    """
    deleted: List[str] = field(default_factory=list)
    inserted: List[str] = field(default_factory=list)


@dataclass
class NormalizedText:
    """
    A text split on newlines plus its trailing-newline flag.

    `render()` reproduces the original text exactly.
    """
    lines: List[str]
    has_trailing_newline: bool

    def render(self) -> str:
        text = "\n".join(self.lines)
        if self.has_trailing_newline:
            text += "\n"
        return text
