"""Tests for high-score persistence."""

import json

import pytest

from blockbreaker.score_store import FileScoreStore, HIGH_SCORE_FILENAME, MemoryScoreStore
from games.BlockBreaker.game.engine import SimulationEngine


class TestMemoryScoreStore:

    def test_defaults_to_zero(self):
        assert MemoryScoreStore().load() == 0

    def test_negative_initial_is_zero(self):
        assert MemoryScoreStore(-5).load() == 0

    def test_save_and_load(self):
        store = MemoryScoreStore()
        store.save(70)
        assert store.load() == 70
        assert store.save_count == 1


class TestFileScoreStore:

    def test_missing_file_reads_zero(self, tmp_path):
        assert FileScoreStore(tmp_path / "none.json").load() == 0

    def test_round_trip(self, tmp_path):
        path = tmp_path / "scores.json"
        FileScoreStore(path).save(1234)

        assert FileScoreStore(path).load() == 1234
        assert json.loads(path.read_text()) == {"high_score": 1234}

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "scores.json"
        FileScoreStore(path).save(5)
        assert path.exists()

    @pytest.mark.parametrize("content", [
        "not json",
        "{}",
        '{"high_score": -3}',
        '{"high_score": "lots"}',
        "",
    ])
    def test_corrupt_file_reads_zero(self, tmp_path, content):
        path = tmp_path / "scores.json"
        path.write_text(content)
        assert FileScoreStore(path).load() == 0

    @pytest.mark.parametrize("content", [
        b'\xff\xfe{"high_score": 9}',
        b'{"high_score": 9\x80}',
    ])
    def test_undecodable_file_reads_zero(self, tmp_path, content):
        path = tmp_path / "scores.json"
        path.write_bytes(content)
        assert FileScoreStore(path).load() == 0

    def test_unreadable_path_reads_zero(self, tmp_path):
        # A directory cannot be read as a file
        assert FileScoreStore(tmp_path).load() == 0

    def test_failed_write_is_swallowed(self, tmp_path):
        store = FileScoreStore(tmp_path)
        store.save(10)
        assert tmp_path.is_dir()

    def test_invalid_value_is_not_written(self, tmp_path):
        path = tmp_path / "scores.json"
        FileScoreStore(path).save(-1)
        assert not path.exists()

    def test_default_path_uses_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BLOCKBREAKER_DATA_DIR", str(tmp_path))
        assert FileScoreStore().path == tmp_path / HIGH_SCORE_FILENAME


class TestEngineWithFileStore:

    def test_high_score_survives_sessions(self, tmp_path, clock, rng):
        path = tmp_path / "scores.json"

        first = SimulationEngine(score_store=FileScoreStore(path), clock=clock, rng=rng)
        first.update_score(80)

        second = SimulationEngine(score_store=FileScoreStore(path), clock=clock, rng=rng)
        assert second.state.high_score == 80
        assert second.state.score == 0
