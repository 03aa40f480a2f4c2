"""Tests for the searchkit-lite command line."""
from __future__ import annotations

import io

import pytest

from searchkit_lite.cli import main


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("abcxabcdabcdabcy\n")
    return path


class TestSearchCommand:
    def test_first_match(self, corpus_file, capsys) -> None:
        main(["search", "abcdabcy", str(corpus_file)])
        assert capsys.readouterr().out == "8\n"

    @pytest.mark.parametrize("algorithm", ["bm", "bmh", "kmp", "naive"])
    def test_every_algorithm(self, algorithm, corpus_file, capsys) -> None:
        main(["search", "-a", algorithm, "abcd", str(corpus_file)])
        assert capsys.readouterr().out == "4\n"

    def test_all_matches(self, corpus_file, capsys) -> None:
        main(["search", "--all", "abc", str(corpus_file)])
        assert capsys.readouterr().out.split() == ["0", "4", "8", "12"]

    def test_bytes_mode(self, tmp_path, capsys) -> None:
        path = tmp_path / "data.bin"
        path.write_bytes(b"\x00\xffneedle")
        main(["search", "--bytes", "needle", str(path)])
        assert capsys.readouterr().out == "2\n"

    def test_no_match_exits_1(self, corpus_file, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "xyz", str(corpus_file)])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_missing_file_exits_2(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "x", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 2
        assert "searchkit-lite:" in capsys.readouterr().err

    def test_reads_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("hello world"))
        main(["search", "world"])
        assert capsys.readouterr().out == "6\n"

    def test_undecodable_file_exits_2(self, tmp_path, capsys) -> None:
        path = tmp_path / "data.bin"
        path.write_bytes(b"\xff\xfe needle")
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "needle", str(path)])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "--bytes" in captured.err

        main(["search", "--bytes", "needle", str(path)])
        assert capsys.readouterr().out == "3\n"


class TestHexCommands:
    def test_hex(self, capsys) -> None:
        main(["hex", "abc"])
        assert capsys.readouterr().out == "616263\n"

    def test_hex_stdin_drops_trailing_newline(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
        main(["hex"])
        assert capsys.readouterr().out == "616263\n"

    def test_hex_unhex_stdin_round_trip(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
        main(["hex"])
        encoded = capsys.readouterr().out
        monkeypatch.setattr("sys.stdin", io.StringIO(encoded))
        main(["unhex"])
        assert capsys.readouterr().out == "abc\n"

    def test_unhex(self, capsys) -> None:
        main(["unhex", "616263"])
        assert capsys.readouterr().out == "abc\n"

    def test_unhex_bad_input(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["unhex", "61zz"])
        assert exc_info.value.code == 2
        assert "non-hex character 'z'" in capsys.readouterr().err

    def test_unhex_truncated(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["unhex", "616"])
        assert exc_info.value.code == 2


class TestProfileCommand:
    def test_profile(self, capsys) -> None:
        main([
            "profile", "--corpus-size", "1000", "--pattern-size", "8",
            "--searches", "5", "--kind", "dna",
        ])
        out = capsys.readouterr().out
        assert "=== bm ===" in out
        assert "=== kmp ===" in out
        assert "Algorithm" in out

    def test_pattern_longer_than_corpus_exits_2(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["profile", "--corpus-size", "10", "--pattern-size", "20"])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "pattern_size" in captured.err
        assert "Traceback" not in captured.err

    def test_no_command_prints_help(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: searchkit-lite" in capsys.readouterr().out
