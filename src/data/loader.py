import os, logging, yaml
from typing import Dict, Any
from .schema import GameConfig

log = logging.getLogger("letterbox.loader")

DEFAULTS: Dict[str, Any] = {
    "game": {
        "title": "Letterbox Bounce",
        "resolution": [1280, 720],
        "target_fps": 60,
        "tick_rate": 60,
        "clear_color": [102, 102, 102],
    },
    "debug": {"overlay": False},
    "logging": {"level": "INFO"},
}


def _read_yaml(path: str, default=None):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or (default or {})
    except FileNotFoundError:
        return default or {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("could not read %s (%s), using defaults", path, exc)
        return default or {}


def merge_into(target: Dict[str, Any], src: Dict[str, Any]):
    """Deep-merge src into target; later values win on the same key."""
    for k, v in (src or {}).items():
        if isinstance(v, dict) and isinstance(target.get(k), dict):
            merge_into(target[k], v)
        else:
            target[k] = v
    return target


# ---------- Value checks ----------
def _size(v):
    W, H = v
    if int(W) <= 0 or int(H) <= 0:
        raise ValueError(f"size must be positive, got {v!r}")
    return (int(W), int(H))


def _rgb(v):
    r, g, b = (int(c) for c in v)
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"colour channels must be 0..255, got {v!r}")
    return (r, g, b)


def _positive_int(v):
    n = int(v)
    if n <= 0:
        raise ValueError(f"must be positive, got {v!r}")
    return n


def _flag(v):
    if not isinstance(v, bool):
        raise ValueError(f"expected true/false, got {v!r}")
    return v


def _section(d: Dict[str, Any], name: str) -> Dict[str, Any]:
    sec = d.get(name)
    if isinstance(sec, dict):
        return sec
    log.warning("'%s' must be a mapping, got %s; using defaults", name, type(sec).__name__)
    return dict(DEFAULTS[name])


def _value(section: Dict[str, Any], name: str, key: str, conv):
    """Convert section[key]; a bad value logs a warning and takes the default."""
    default = DEFAULTS[name][key]
    try:
        return conv(section.get(key, default))
    except (TypeError, ValueError) as exc:
        log.warning("bad %s.%s %r (%s); using %r", name, key, section.get(key), exc, default)
        return conv(default)


class Loader:
    """
    Reads the game configuration:
      - configs/game.yaml  (window, loop, debug and logging settings)
    Any key missing from the file falls back to DEFAULTS.
    """
    def __init__(self, base_dir: str):
        self.base_dir = base_dir
        self.config_dir = os.path.join(base_dir, "configs")

    # ---------- Raw config ----------
    def load_raw_config(self) -> Dict[str, Any]:
        raw = _read_yaml(os.path.join(self.config_dir, "game.yaml"), default={})
        if not isinstance(raw, dict):
            log.warning("game.yaml must be a mapping, got %s", type(raw).__name__)
            raw = {}
        out: Dict[str, Any] = {}
        merge_into(out, {k: dict(v) for k, v in DEFAULTS.items()})
        return merge_into(out, raw)

    # ---------- Game config ----------
    def load_game_config(self) -> GameConfig:
        d = self.load_raw_config()
        game = _section(d, "game")
        debug = _section(d, "debug")
        logging_cfg = _section(d, "logging")
        cfg = GameConfig(
            title=_value(game, "game", "title", str),
            resolution=_value(game, "game", "resolution", _size),
            target_fps=_value(game, "game", "target_fps", _positive_int),
            tick_rate=_value(game, "game", "tick_rate", lambda v: max(1, int(v))),
            clear_color=_value(game, "game", "clear_color", _rgb),
            debug_overlay=_value(debug, "debug", "overlay", _flag),
            log_level=_value(logging_cfg, "logging", "level", lambda v: str(v).upper()),
        )
        W, H = cfg.resolution
        log.info("config loaded: %sx%s @ %s fps, %s ticks/s", W, H, cfg.target_fps, cfg.tick_rate)
        return cfg
