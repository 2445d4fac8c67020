import logging
import pytest
from data.loader import Loader, merge_into
from engine.log import setup_logging

def _write(tmp_path, text):
    d = tmp_path / "configs"
    d.mkdir()
    (d / "game.yaml").write_text(text, encoding="utf-8")

def test_defaults_without_file(tmp_path):
    cfg = Loader(str(tmp_path)).load_game_config()
    assert cfg.resolution == (1280, 720)
    assert cfg.tick_rate == 60
    assert cfg.clear_color == (102, 102, 102)
    assert cfg.debug_overlay is False
    assert cfg.log_level == "INFO"

def test_partial_file_keeps_other_defaults(tmp_path):
    _write(tmp_path, "game:\n  resolution: [800, 600]\nlogging:\n  level: debug\n")
    cfg = Loader(str(tmp_path)).load_game_config()
    assert cfg.resolution == (800, 600)
    assert cfg.title == "Letterbox Bounce"
    assert cfg.target_fps == 60
    assert cfg.log_level == "DEBUG"

def test_malformed_file_falls_back(tmp_path, caplog):
    _write(tmp_path, "game: [unclosed\n")
    with caplog.at_level(logging.WARNING, logger="letterbox.loader"):
        cfg = Loader(str(tmp_path)).load_game_config()
    assert cfg.resolution == (1280, 720)
    assert "using defaults" in caplog.text

def test_non_mapping_file_falls_back(tmp_path):
    _write(tmp_path, "- just\n- a list\n")
    assert Loader(str(tmp_path)).load_game_config().tick_rate == 60

def test_tick_rate_never_zero(tmp_path):
    _write(tmp_path, "game:\n  tick_rate: 0\n")
    assert Loader(str(tmp_path)).load_game_config().tick_rate == 1

def test_merge_into_is_deep():
    out = merge_into({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": 4})
    assert out == {"a": {"x": 1, "y": 3}, "b": 4}

def test_setup_logging_accepts_names():
    logger = setup_logging("debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    setup_logging("nonsense")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1

@pytest.mark.parametrize("body", [
    "game: 5\n",
    "game:\n  resolution: [800]\n",
    "game:\n  tick_rate: fast\n",
    "debug: yes\n",
    "game:\n  clear_color: [300, 0, 0]\n  target_fps: -5\n",
    "debug:\n  overlay: maybe\n",
])
def test_bad_values_fall_back_to_defaults(tmp_path, caplog, body):
    _write(tmp_path, body)
    with caplog.at_level(logging.WARNING, logger="letterbox.loader"):
        cfg = Loader(str(tmp_path)).load_game_config()
    assert cfg.resolution == (1280, 720)
    assert cfg.tick_rate == 60
    assert cfg.target_fps == 60
    assert cfg.clear_color == (102, 102, 102)
    assert cfg.debug_overlay is False
    assert "using" in caplog.text

def test_good_keys_survive_next_to_bad_ones(tmp_path):
    _write(tmp_path, "game:\n  resolution: [800, 600]\n  tick_rate: fast\n")
    cfg = Loader(str(tmp_path)).load_game_config()
    assert cfg.resolution == (800, 600)
    assert cfg.tick_rate == 60
