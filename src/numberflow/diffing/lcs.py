"""Longest-common-subsequence alignment of short character sequences.

Used by the formatted diff fallback and the position-shift detector to decide which
digits persisted between two renderings. The dynamic programme is O(n*m) in time and
memory; numeric inputs are a few dozen characters, so anything above ``max_length``
is aligned by common prefix and suffix instead.
"""
from __future__ import annotations

from collections.abc import Sequence

from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_LENGTH = 64


def _affix_match(a: Sequence[str], b: Sequence[str]) -> list[tuple[int, int]]:
    prefix = 0
    limit = min(len(a), len(b))
    while prefix < limit and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and a[len(a) - 1 - suffix] == b[len(b) - 1 - suffix]:
        suffix += 1

    pairs = [(i, i) for i in range(prefix)]
    pairs.extend((len(a) - suffix + k, len(b) - suffix + k) for k in range(suffix))
    return pairs


def lcs_match(a: Sequence[str], b: Sequence[str], max_length: int = DEFAULT_MAX_LENGTH) -> list[tuple[int, int]]:
    """Return matched ``(index_in_a, index_in_b)`` pairs, in ascending order.

    Ties between equally long alignments are broken towards the earliest match, so
    for ``"8888"`` → ``"88888"`` the unmatched character is the last one.
    """
    if not a or not b:
        return []
    if max(len(a), len(b)) > max_length:
        logger.debug("lcs_length_exceeded", old_length=len(a), new_length=len(b), max_length=max_length)
        return _affix_match(a, b)

    n, m = len(a), len(b)
    # table[i][j] = LCS length of a[i:] and b[j:]
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    pairs: list[tuple[int, int]] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            pairs.append((i, j))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1
    return pairs
