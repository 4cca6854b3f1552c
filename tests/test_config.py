# tests/test_config.py
import json

import pytest

from trie_autocompleter.core.interaction import Mode
from trie_autocompleter.surface import BufferSurface, CompletionController
from trie_autocompleter.utils.config_manager import DEFAULTS, Config
from trie_autocompleter.utils.logger_utils import Log


def test_defaults_when_file_missing(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.data == DEFAULTS
    assert not (tmp_path / "config.json").exists()


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_prefix": 3, "allow_zero_freq": True}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg["min_prefix"] == 3
    assert cfg["allow_zero_freq"] is True
    assert cfg["commit_key"] == "enter"


def test_unknown_and_broken_files_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    assert Config(str(path)).data == DEFAULTS

    path.write_text(json.dumps({"bogus": 1}), encoding="utf8")
    assert "bogus" not in Config(str(path)).data


def test_set_coerces_and_save_roundtrip(tmp_path):
    path = tmp_path / "sub" / "config.json"
    cfg = Config(str(path))
    cfg.set("min_prefix", "4")
    cfg.set("allow_zero_freq", "yes")
    cfg.save()
    again = Config(str(path))
    assert again["min_prefix"] == 4
    assert again["allow_zero_freq"] is True


def test_set_unknown_key(tmp_path):
    with pytest.raises(KeyError):
        Config(str(tmp_path / "c.json")).set("nope", 1)


def test_apply_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(Log, "path", Log.path)
    cfg = Config(str(tmp_path / "c.json"))
    cfg.data["log_path"] = str(tmp_path / "out.log")
    cfg.data["log_level"] = "warning"
    cfg.apply_logging()
    assert Log.path == str(tmp_path / "out.log")
    assert Log.level == "WARNING"
    Log.info("hidden")
    Log.warning("shown")
    logged = (tmp_path / "out.log").read_text(encoding="utf-8")
    assert "shown" in logged
    assert "hidden" not in logged


def test_file_values_are_coerced(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"min_prefix": "3", "allow_zero_freq": "yes", "log_level": "debug"}),
        encoding="utf8",
    )
    cfg = Config(str(path))
    assert cfg["min_prefix"] == 3
    assert cfg["allow_zero_freq"] is True
    assert cfg["log_level"] == "debug"


@pytest.mark.parametrize("key,bad", [
    ("min_prefix", "abc"),
    ("min_prefix", [2]),
    ("min_prefix", 2.5),
    ("allow_zero_freq", [True]),
    ("log_level", "loud"),
    ("commit_key", 13),
])
def test_bad_file_values_fall_back_to_default(tmp_path, key, bad):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({key: bad}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg[key] == DEFAULTS[key]
    logged = (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")
    assert "bad value" in logged


def test_coerced_min_prefix_drives_completion(tmp_path, search):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_prefix": "3"}), encoding="utf8")
    cfg = Config(str(path))
    surface = BufferSurface()
    ctl = CompletionController(surface, search, min_prefix=cfg["min_prefix"])
    ctl.type_text("th")
    assert surface.text == "th"
    ctl.type_text("eo")
    assert surface.text == "theory"
    assert ctl.mode is Mode.COMPLETION
