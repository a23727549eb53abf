# 19.10.26

import json

from M3UJson.utils.config_json import ConfigManager, DEFAULT_CONFIG


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_user_values_merge_over_defaults(tmp_path):
    manager = ConfigManager(write_config(tmp_path, {"OUTPUT": {"indent": 4}, "EXTRACT": {"max_workers": "3"}}))

    assert manager.config.get_int("OUTPUT", "indent") == 4
    assert manager.config.get("OUTPUT", "path") == DEFAULT_CONFIG["OUTPUT"]["path"]
    assert manager.config.get_int("EXTRACT", "max_workers") == 3


def test_typed_accessors(tmp_path):
    manager = ConfigManager(write_config(tmp_path, {
        "DEFAULT": {"debug": "yes", "show_trace": "off"},
        "EXTRA": {"names": "a, b,,c", "mapping": {"x": 1}, "broken": "abc"}
    }))

    assert manager.config.get_bool("DEFAULT", "debug") is True
    assert manager.config.get_bool("DEFAULT", "show_trace") is False
    assert manager.config.get_list("EXTRA", "names") == ["a", "b", "c"]
    assert manager.config.get_dict("EXTRA", "mapping") == {"x": 1}
    assert manager.config.get_int("EXTRA", "broken", default=7) == 7
    assert manager.config.get("MISSING", "key", default="fallback") == "fallback"


def test_invalid_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    manager = ConfigManager(str(path))

    assert manager.config.to_dict() == DEFAULT_CONFIG


def test_set_and_reload(tmp_path):
    manager = ConfigManager(write_config(tmp_path, {}))

    manager.config.set("OUTPUT", "path", "-")
    assert manager.config.get("OUTPUT", "path") == "-"

    manager.reload()
    assert manager.config.get("OUTPUT", "path") == "output.json"


def test_defaults_are_not_shared_between_instances(tmp_path):
    first = ConfigManager(write_config(tmp_path, {}))
    first.config.set("EXTRACT", "max_workers", 9)

    second = ConfigManager(write_config(tmp_path, {}))
    assert second.config.get_int("EXTRACT", "max_workers") == 1
