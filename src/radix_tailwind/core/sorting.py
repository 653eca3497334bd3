"""
Stable ordering for Radix variable names.

Solid steps (``--red-1`` .. ``--red-12``) sort before alpha steps
(``--red-a1`` .. ``--red-a12``); each group sorts numerically.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cmp_to_key

_VAR_INDEX_RE = re.compile(r"^--[a-z]+(?:-[a-z]+)*-(\d+|a\d+)$")


def parse_index(name: str) -> tuple[bool, int] | None:
    """Split the trailing index of a variable name into (is_alpha, number).

    Returns:
        None if the name does not end in ``-<n>`` or ``-a<n>``.
    """
    match = _VAR_INDEX_RE.match(name)
    if not match:
        return None
    index = match.group(1)
    if index.startswith("a"):
        return True, int(index[1:])
    return False, int(index)


def _lexical(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_var_names(a: str, b: str) -> int:
    """Comparator ordering solid before alpha, then by number.

    Falls back to plain string comparison when either name has no
    parseable index. Equal keys are tie-broken on the full name so the
    order is total.
    """
    a_key = parse_index(a)
    b_key = parse_index(b)
    if a_key is None or b_key is None:
        return _lexical(a, b)

    if a_key[0] != b_key[0]:
        return 1 if a_key[0] else -1
    if a_key[1] != b_key[1]:
        return a_key[1] - b_key[1]
    return _lexical(a, b)


def sort_var_names(names: Iterable[str]) -> list[str]:
    """Return the names in deterministic emission order."""
    return sorted(names, key=cmp_to_key(compare_var_names))
