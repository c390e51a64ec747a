"""
Tests for the command-line entry point.
"""
import pytest

from charlm.cli import main, parse_args
from charlm.config import settings
from charlm.services.language_model import LanguageModel
from conftest import create_temp_corpus


class TestParseArgs:
    """Test suite for argument parsing."""

    def test_positional_arguments(self):
        args = parse_args(["3", "the", "100", "fixed", "corpus.txt"])

        assert args.window_length == 3
        assert args.initial_text == "the"
        assert args.text_length == 100
        assert args.mode == "fixed"
        assert args.corpus == "corpus.txt"
        assert args.seed is None
        assert args.dump is False

    def test_invalid_mode_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["3", "the", "100", "sometimes", "corpus.txt"])


class TestMain:
    """Test suite for main()."""

    def test_fixed_mode_uses_default_seed(self, sample_corpus, corpus_path, capsys):
        code = main(["3", "the", "80", "fixed", str(corpus_path)])

        out = capsys.readouterr().out
        expected = LanguageModel(3, seed=settings.RANDOM_SEED).train(sample_corpus).generate("the", 80)
        assert code == 0
        assert out == expected + "\n"

    def test_fixed_mode_is_reproducible(self, corpus_path, capsys):
        main(["2", "to", "60", "fixed", str(corpus_path), "--seed", "5"])
        first = capsys.readouterr().out
        main(["2", "to", "60", "fixed", str(corpus_path), "--seed", "5"])
        second = capsys.readouterr().out

        assert first == second

    def test_random_mode_generates_text(self, tmp_path, capsys):
        path = create_temp_corpus("aaaa", tmp_path)

        code = main(["1", "a", "5", "random", str(path)])

        assert code == 0
        assert capsys.readouterr().out == "aaaaa\n"

    def test_dump_printed_before_text(self, tmp_path, capsys):
        path = create_temp_corpus("aaaa", tmp_path)

        main(["1", "a", "3", "fixed", str(path), "--dump"])

        assert capsys.readouterr().out == "a : ((a 3 1.0 1.0))\naaa\n"

    def test_missing_corpus(self, tmp_path, capsys):
        code = main(["2", "ab", "10", "fixed", str(tmp_path / "missing.txt")])

        assert code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_window_length(self, corpus_path):
        assert main(["0", "ab", "10", "fixed", str(corpus_path)]) == 2

    def test_negative_text_length(self, corpus_path):
        assert main(["2", "ab", "-5", "fixed", str(corpus_path)]) == 2

    def test_undecodable_corpus(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"abc\xff\xfeabc")

        code = main(["2", "ab", "10", "fixed", str(path)])

        assert code == 1
        assert "cannot read corpus file" in capsys.readouterr().err

    def test_corpus_is_directory(self, tmp_path, capsys):
        code = main(["2", "ab", "10", "fixed", str(tmp_path)])

        assert code == 1
        assert "cannot read corpus file" in capsys.readouterr().err

    def test_unknown_encoding(self, corpus_path, capsys):
        code = main(["2", "ab", "10", "fixed", str(corpus_path), "--encoding", "no-such-codec"])

        assert code == 1
