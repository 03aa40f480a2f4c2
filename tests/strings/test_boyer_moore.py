"""Tests for the Boyer-Moore matcher."""

import logging

import pytest

from searchkit_lite.strings.boyer_moore import BoyerMoore, build_suffix_table


class TestSuffixTable:
    def test_no_repeats(self):
        assert build_suffix_table("abc") == [3, 3, 3, 1]

    def test_single_symbol_run(self):
        assert build_suffix_table("aaa") == [1, 1, 1, 1]

    def test_periodic(self):
        assert build_suffix_table("abab") == [2, 2, 2, 2, 1]

    def test_suffix_recurs_once(self):
        assert build_suffix_table("baaa") == [4, 4, 1, 1, 1]

    def test_shifts_are_positive_and_bounded(self):
        for pattern in ["a", "ab", "abcdabcy", "aabaaab", "abracadabra"]:
            table = build_suffix_table(pattern)
            assert len(table) == len(pattern) + 1
            assert all(1 <= shift <= len(pattern) for shift in table)

    def test_empty_pattern_builds_nothing(self):
        bm = BoyerMoore("")
        assert bm.skip_table is None
        assert bm.suffix_table == []


class TestBoyerMooreSearch:
    def test_known_scenarios(self, scenario):
        pattern, corpus, expected = scenario
        assert BoyerMoore(pattern).search(corpus) == expected

    def test_call_is_search(self):
        bm = BoyerMoore("cd")
        assert bm("abcd") == bm.search("abcd") == 2

    def test_bad_character_skips_past_absent_symbol(self):
        bm = BoyerMoore("abc")
        assert bm.search("xxxxxxxxxabc") == 9

    def test_good_suffix_after_partial_match(self):
        assert BoyerMoore("abcab").search("xxabcabcab") == 2
        assert BoyerMoore("cabab").search("abababcabab") == 6

    def test_bytes(self):
        bm = BoyerMoore(b"\x00\xff")
        assert bm.search(b"\x01\x00\x00\xff") == 2
        assert bm.search(bytearray(b"\x00\xff")) == 0
        assert bm.search(memoryview(b"\xff\x00\xff")) == 1

    def test_map_table_with_bytes(self):
        bm = BoyerMoore(b"ana", table="map")
        assert bm.search(b"banana") == 1

    def test_generic_sequences(self):
        bm = BoyerMoore([3, 1, 4])
        assert bm.search([2, 7, 3, 1, 4, 1, 5]) == 2
        assert bm.search((3, 1, 4)) == 0
        assert bm.search([3, 1, 5]) == -1

    def test_logs_table_construction(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="searchkit_lite.strings.boyer_moore"):
            BoyerMoore("abc")
        assert "Boyer-Moore tables built: m=3" in caplog.text
        assert "MapSkipTable" in caplog.text


class TestBoyerMooreContract:
    def test_text_pattern_rejects_bytes_corpus(self):
        with pytest.raises(TypeError):
            BoyerMoore("ab").search(b"ab")

    def test_bytes_pattern_rejects_text_corpus(self):
        with pytest.raises(TypeError):
            BoyerMoore(b"ab").search("ab")

    def test_array_table_rejects_int_list(self):
        with pytest.raises(TypeError, match="byte pattern"):
            BoyerMoore(b"ab").search([97, 98])

    def test_bad_table_option(self):
        with pytest.raises(ValueError):
            BoyerMoore("ab", table="trie")

    def test_len_and_pattern(self):
        bm = BoyerMoore("needle")
        assert len(bm) == 6
        assert bm.pattern == "needle"
        assert repr(bm) == "BoyerMoore('needle')"
