"""Tests for the pattern runner script."""

import importlib.util
import logging
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_life.py"


@pytest.fixture(scope="module")
def run_life():
    spec = importlib.util.spec_from_file_location("run_life", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunPattern:
    """Test the runner's summary metrics."""

    def test_glider_keeps_mass(self, run_life):
        results = run_life.run_pattern("glider", rows=20, cols=20, generations=12)

        assert results["initial_live_count"] == 5
        assert results["final_live_count"] == 5
        assert len(results["live_count_history"]) == 12

    def test_blinker_period(self, run_life):
        results = run_life.run_pattern("blinker", rows=5, cols=5, generations=4)

        assert results["kind"] == "oscillator"
        assert results["period"] == 2

    def test_zero_generations(self, run_life):
        results = run_life.run_pattern("block", rows=4, cols=4, generations=0)

        assert results["final_live_count"] == 4
        assert results["live_count_history"] == []


class TestMain:
    """Test the command line entry point."""

    def test_success(self, run_life, caplog):
        with caplog.at_level(logging.INFO):
            code = run_life.main(["--pattern", "toad", "--rows", "6", "--cols", "6",
                                  "--generations", "2"])

        assert code == 0
        assert "period=2" in caplog.text

    def test_invalid_dimensions(self, run_life, caplog):
        code = run_life.main(["--rows", "0"])

        assert code == 1
        assert "Invalid run configuration" in caplog.text

    def test_pattern_past_edge(self, run_life):
        assert run_life.main(["--pattern", "glider", "--x", "19", "--y", "0"]) == 1

    def test_unknown_pattern(self, run_life):
        with pytest.raises(SystemExit):
            run_life.main(["--pattern", "spaceship"])
