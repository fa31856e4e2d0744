from typing import Callable, List, Optional, Sequence
from .models import Delete, Equal, Insert, Operation

LineEquality = Callable[[str, str], bool]


def _exact(a: str, b: str) -> bool:
    return a == b


class LCSAligner:
    """
    Longest-common-subsequence aligner with a pluggable line equality.
    """

    def __init__(self, left: Sequence[str], right: Sequence[str],
                 equality: Optional[LineEquality] = None):
        self.left = left
        self.right = right
        self.equality = equality or _exact
        self.matrix = []
        self._build_matrix()

    def _build_matrix(self):
        """
        Fills matrix[i][j] with the LCS length of left[i:] and right[j:].

        The extra row and column stay at zero so the walk never needs bounds
        checks.
        """
        n, m = len(self.left), len(self.right)
        self.matrix = [[0] * (m + 1) for _ in range(n + 1)]

        for i in range(n - 1, -1, -1):
            row, below = self.matrix[i], self.matrix[i + 1]
            for j in range(m - 1, -1, -1):
                if self.equality(self.left[i], self.right[j]):
                    row[j] = below[j + 1] + 1
                else:
                    row[j] = max(below[j], row[j + 1])

    @property
    def length(self) -> int:
        """Size of the common subsequence."""
        return self.matrix[0][0]

    def align(self) -> List[Operation]:
        """
        Walks the table from the start and emits the operation sequence.

        On a mismatch the side with the longer remaining subsequence wins;
        ties drain the left side first, so a hunk always lists its deletions
        before its insertions.

        Returns:
            List[Operation]: Equal/Delete/Insert covering every index of both
            sequences exactly once, in order.
        """
        ops = []
        n, m = len(self.left), len(self.right)
        i = j = 0

        while i < n and j < m:
            if self.equality(self.left[i], self.right[j]):
                ops.append(Equal(i, j))
                i += 1
                j += 1
            elif self.matrix[i + 1][j] >= self.matrix[i][j + 1]:
                ops.append(Delete(i))
                i += 1
            else:
                ops.append(Insert(j))
                j += 1

        while i < n:
            ops.append(Delete(i))
            i += 1
        while j < m:
            ops.append(Insert(j))
            j += 1
        return ops


def align(left: Sequence[str], right: Sequence[str],
          equality: Optional[LineEquality] = None) -> List[Operation]:
    return LCSAligner(left, right, equality).align()
