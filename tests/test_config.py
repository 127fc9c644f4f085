import json
import logging

import pytest

from algoviz.config import DEFAULT_CONFIG, load_config, setup_logging
from algoviz.errors import ConfigError


def test_defaults():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG
    assert config["animation"]["traversal_delay"] == 1.0
    assert config["animation"]["dijkstra_select_delay"] == 1.5
    assert config["sorting"]["random_size"] == 8


def test_file_overrides_are_deep_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"animation": {"traversal_delay": 0.2}}), encoding="utf-8")
    config = load_config(path)
    assert config["animation"]["traversal_delay"] == 0.2
    assert config["animation"]["dijkstra_select_delay"] == 1.5
    assert DEFAULT_CONFIG["animation"]["traversal_delay"] == 1.0


@pytest.mark.parametrize("content", ['{"colours": {}}', "{not json", "[1, 2]"])
def test_bad_config_files(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.json")


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "algoviz.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG", log_file)
        logging.getLogger("algoviz.tests").debug("hello from the tests")
        for handler in root.handlers:
            handler.flush()
        assert "hello from the tests" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                handler.close()
            root.removeHandler(handler)
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
