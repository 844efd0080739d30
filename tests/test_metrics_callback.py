import csv
from types import SimpleNamespace

import pytest

from rl.metrics_callback import MetricsCallback


class RecordingLogger:
    def __init__(self):
        self.records = []

    def record(self, key, value):
        self.records.append((key, value))


@pytest.fixture
def callback(tmp_path):
    cb = MetricsCallback(log_dir=str(tmp_path), algo_name="ppo", verbose=0)
    cb.model = SimpleNamespace(logger=RecordingLogger())
    cb._on_training_start()
    yield cb
    cb._on_training_end()


def test_finished_episodes_are_recorded(callback):
    callback.num_timesteps = 500
    callback.locals = {
        "infos": [
            {"episode": {"r": 3.5, "l": 420}, "score": 4, "game_over": True},
            {"score": 1, "game_over": False},
            {"episode": {"r": 9.0, "l": 3600}, "score": 10, "game_over": False},
        ],
        "dones": [True, False, True],
    }
    assert callback._on_step() is True

    assert callback.episode_rewards == [3.5, 9.0]
    assert callback.episode_lengths == [420, 3600]
    assert callback.episode_scores == [4, 10]
    assert callback.episode_survived == [0.0, 1.0]
    assert ("custom/episode_score", 4) in callback.model.logger.records

    summary = callback.get_summary()
    assert summary["total_episodes"] == 2
    assert summary["mean_score"] == pytest.approx(7.0)
    assert summary["survival_rate"] == pytest.approx(0.5)


def test_unfinished_steps_are_ignored(callback):
    callback.locals = {"infos": [{"score": 2, "game_over": False}], "dones": [False]}
    callback._on_step()
    assert callback.episode_scores == []
    assert callback.get_summary() == {}


def test_episodes_written_to_csv(callback):
    callback.num_timesteps = 64
    callback.locals = {
        "infos": [{"episode": {"r": 1.0, "l": 30}, "score": 2, "game_over": True}],
        "dones": [True],
    }
    callback._on_step()
    callback._on_training_end()

    with open(callback.csv_path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["timestep", "episode", "reward", "length", "score", "survived"]
    assert rows[1] == ["64", "1", "1.0", "30", "2", "0.0"]
