"""
Line classification helpers.

Only single-line markers are recognised: `//` and `#`, and only when they sit
at column 0 or directly after whitespace. Block comments are not supported.
"""

from typing import Callable, Sequence

COMMENT_MARKERS = ("//", "#")
QUOTE_CHARS = ('"', "'", "`")


class CommentClassifier:
    """
    Static utility class for telling code apart from comments and whitespace.
    """

    @staticmethod
    def is_blank(line: str) -> bool:
        return not line.strip()

    @staticmethod
    def is_comment_or_blank(line: str) -> bool:
        """
        True if the line is empty, whitespace only, or a full-line comment.
        """
        stripped = line.lstrip()
        if not stripped:
            return True
        return stripped.startswith(COMMENT_MARKERS)

    @staticmethod
    def find_comment_start(line: str) -> int:
        """
        Returns the column where a trailing comment starts, or -1.

        Scans left to right in one of two states: outside a string, or inside
        a string opened by `quote`. A quote preceded by an unescaped backslash
        (an odd run of backslashes) does not toggle the state. An unterminated
        string swallows the rest of the line.
        """
        quote = None
        backslashes = 0
        for i, char in enumerate(line):
            escaped = backslashes % 2 == 1
            backslashes = backslashes + 1 if char == "\\" else 0

            if char in QUOTE_CHARS and not escaped:
                if quote is None:
                    quote = char
                elif char == quote:
                    quote = None
                continue

            if quote is not None:
                continue

            at_boundary = i == 0 or line[i - 1].isspace()
            if not at_boundary:
                continue
            if char == "#":
                return i
            if char == "/" and line[i + 1:i + 2] == "/":
                return i
        return -1

    @staticmethod
    def strip_inline_comment(line: str) -> str:
        """
        Cuts a trailing `//` or `#` comment off a line.

        The line is returned unchanged when no marker is found outside a
        quoted string; otherwise the code before the marker is returned with
        trailing whitespace removed. A trailing "\\r" is kept so CRLF files
        keep their line endings.
        """
        start = CommentClassifier.find_comment_start(line)
        if start == -1:
            return line
        eol = "\r" if line.endswith("\r") else ""
        return line[:start].rstrip() + eol

    @staticmethod
    def code_of(line: str) -> str:
        """The code part of a line: inline comment and trailing whitespace removed."""
        return CommentClassifier.strip_inline_comment(line).rstrip()

    @staticmethod
    def equal_ignoring_comments(a: str, b: str) -> bool:
        """
        Compares two lines by their code, ignoring comments and trailing
        whitespace.

        Two lines without any code are only equal when their right-trimmed
        text matches, so different comment lines never pair up.
        """
        return CommentClassifier._codes_equal(
            a, b, CommentClassifier.code_of(a), CommentClassifier.code_of(b))

    @staticmethod
    def cached_equality(*sequences: Sequence[str]) -> Callable[[str, str], bool]:
        """
        Builds an equal_ignoring_comments predicate that scans each distinct
        line of `sequences` once instead of once per comparison.

        Lines outside `sequences` are scanned on first use.
        """
        codes = {}
        for lines in sequences:
            for line in lines:
                if line not in codes:
                    codes[line] = CommentClassifier.code_of(line)

        def code(line):
            if line not in codes:
                codes[line] = CommentClassifier.code_of(line)
            return codes[line]

        def equal(a: str, b: str) -> bool:
            return CommentClassifier._codes_equal(a, b, code(a), code(b))

        return equal

    @staticmethod
    def _codes_equal(a: str, b: str, code_a: str, code_b: str) -> bool:
        if not code_a and not code_b:
            return a.rstrip() == b.rstrip()
        return code_a == code_b
