"""Shared fixtures for the substring matcher tests."""

from __future__ import annotations

import pytest

from searchkit_lite.strings.boyer_moore import BoyerMoore
from searchkit_lite.strings.horspool import BoyerMooreHorspool
from searchkit_lite.strings.kmp import KnuthMorrisPratt

MATCHERS = [BoyerMoore, BoyerMooreHorspool, KnuthMorrisPratt]

# (pattern, corpus, expected first match)
SCENARIOS = [
    ("abcdabcy", "abcxabcdabcdabcy", 8),
    ("aaa", "aaaaaa", 0),
    ("xyz", "abc", -1),
    ("", "", 0),
    ("", "abc", 0),
    ("a", "", -1),
    ("abcd", "abc", -1),
    ("abc", "abc", 0),
    ("c", "abc", 2),
    ("needle", "haystack with a needle in it", 16),
    ("abab", "abaabaabab", 6),
    ("baaa", "aaaaaaaaaa", -1),
    ("example", "here is a simple example", 17),
]


@pytest.fixture(params=MATCHERS, ids=lambda cls: cls.name)
def matcher_cls(request):
    """Each matcher class in turn."""
    return request.param


@pytest.fixture(params=SCENARIOS, ids=lambda s: f"{s[0]!r}-in-{s[1]!r}")
def scenario(request):
    """(pattern, corpus, expected) triples with known answers."""
    return request.param
