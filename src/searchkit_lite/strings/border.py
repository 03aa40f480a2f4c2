"""Border (prefix-function) table shared by KMP and Boyer-Moore.

A border of a sequence is a proper prefix that is also a suffix:
"abab" has borders "" and "ab". For every prefix s[:i+1] we record
the length of its longest border. The recurrence reuses earlier
entries to fall back through shorter borders, so the total work is
O(len(s)) even though the inner loop looks quadratic: k grows by at
most one per outer step and every fallback shrinks it.

KMP uses this table directly as its failure function (shifted by one
position). Boyer-Moore runs it over the pattern and over the reversed
pattern to derive its good-suffix shifts.
"""

from __future__ import annotations

from collections.abc import Sequence


def border_table(s: Sequence) -> list[int]:
    """Return border[i] = length of the longest proper border of s[:i+1]."""
    count = len(s)
    if count == 0:
        return []
    border = [0] * count
    k = 0
    for i in range(1, count):
        symbol = s[i]
        while k > 0 and s[k] != symbol:
            k = border[k - 1]
        if s[k] == symbol:
            k += 1
        border[i] = k
    return border
