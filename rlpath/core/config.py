from __future__ import annotations
import json
from pathlib import Path
from platformdirs import user_config_dir

from .log import get_logger

APP_NAME = "rlpath"
APP_AUTHOR = "rlpath"
CONFIG_DIR = Path(user_config_dir(APP_NAME, APP_AUTHOR))
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_PROMPT = "$ "
DEFAULT_ROOT_DIR = ""
SUPPORTED_KEYS = ["prompt", "root_dir", "only_dir"]
_TRUE_WORDS = {"1", "true", "yes", "on", "y"}

log = get_logger(__name__)


def load_config() -> dict:
    if CONFIG_PATH.exists():
        try:
            return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable config %s: %s", CONFIG_PATH, e)
    return {}

def save_config(cfg: dict) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(cfg, indent=2, ensure_ascii=False), encoding="utf-8")

def parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)

def normalize_with_defaults(cfg: dict) -> dict:
    if not cfg.get("prompt"):
        cfg["prompt"] = DEFAULT_PROMPT
    if cfg.get("root_dir") is None:
        cfg["root_dir"] = DEFAULT_ROOT_DIR
    cfg["only_dir"] = parse_bool(cfg.get("only_dir", False))
    return cfg
