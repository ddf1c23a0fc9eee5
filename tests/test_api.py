"""Tests for the public API."""

import pytest

from ccscan import analyze, score_source
from ccscan.config import AnalysisConfig
from ccscan.exceptions import DiscoveryError, FileParseError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    monkeypatch.delenv("CCSCAN_THRESHOLD", raising=False)


class TestAnalyze:
    def test_analyze_corpus(self, corpus):
        result = analyze(corpus, threshold=2)
        assert result.summary.total_functions == 3
        assert [fn.name for fn in result.summary.flagged] == ["complex", "nested"]
        assert [e.path for e in result.errors] == ["subdir/broken.py"]

    def test_explicit_config(self, corpus):
        """exclude_dirs flows from configuration into discovery."""
        config = AnalysisConfig(exclude_dirs=("subdir",))
        result = analyze(corpus, config=config)
        names = {fn.name for fn in result.functions()}
        assert names == {"complex", "simple", "ignored", "cached"}
        assert result.errors == ()

    def test_missing_path(self, tmp_path):
        with pytest.raises(DiscoveryError):
            analyze(tmp_path / "missing")

    def test_unlistable_directory_reaches_summary(self, locked_subdir):
        result = analyze(locked_subdir)
        assert result.summary.total_functions == 1
        assert [(e.path, e.reason) for e in result.summary.errors] == [
            ("locked", "cannot list directory: Permission denied")
        ]


class TestScoreSource:
    def test_scores_snippet(self):
        fns = score_source("def f(a, b):\n    return a or b\n")
        assert [(fn.name, fn.score, fn.path) for fn in fns] == [("f", 2, "<string>")]

    def test_accepts_bytes(self):
        assert score_source(b"def f():\n    pass\n")[0].score == 1

    def test_syntax_error(self):
        with pytest.raises(FileParseError):
            score_source("def f(:\n")
