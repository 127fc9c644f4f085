# config.py
import json
import logging
from pathlib import Path

from algoviz.errors import ConfigError
from algoviz.style_merger import merge_styles

# All tunables live here; a JSON file passed to load_config() may override any
# subset of them.
DEFAULT_CONFIG = {
    "animation": {
        # seconds between traversal events (discover / visit / expand)
        "traversal_delay": 1.0,
        # Dijkstra pauses longer when it selects the next node
        "dijkstra_select_delay": 1.5,
        "search_delay": 1.0,
        # sort player speed slider, in milliseconds; interval = 1100 - speed
        "speed_ms": 500,
        "speed_min": 100,
        "speed_max": 1000,
        "speed_step": 50,
    },
    "sorting": {
        "random_size": 8,
        "random_min": 1,
        "random_max": 100,
        "default_input": {
            "quick_sort": "64,34,25,12,22,11,90",
            "merge_sort": "64,34,25,12,22,11,90,88",
        },
    },
    "graph": {
        "default_start": 0,
        "default_end": 5,
    },
    "logging": {
        "level": "INFO",
        "log_file": None,
    },
}


def load_config(config_path=None) -> dict:
    """
    Return the effective configuration.
    Without a path the defaults are returned; otherwise the JSON file is
    deep-merged over them. Unknown top-level sections raise ConfigError.
    """
    if config_path is None:
        return merge_styles(DEFAULT_CONFIG, {})

    path = Path(config_path)
    try:
        overrides = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}")

    if not isinstance(overrides, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown config section(s): {', '.join(unknown)}")

    return merge_styles(DEFAULT_CONFIG, overrides)


def setup_logging(level="INFO", log_file=None):
    """Configure root logging: console always, plus a UTF-8 file if requested."""
    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
