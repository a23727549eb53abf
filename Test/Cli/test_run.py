# 19.10.26

import json

import pytest

from M3UJson.cli import run as run_module
from M3UJson.utils import config_manager
from M3UJson.utils.config_json import ConfigSection


PLAYLIST = """#EXTM3U
#EXTINF:-1 tvg-id="ch1",Channel 1
#KODIPROP:inputstream.adaptive.license_key={"keys":[{"kty":"oct","k":"QUFBQQ","kid":"QkJCQg"}]}
https://example.com/a.mpd
#EXTINF:-1 tvg-name="broken",Broken
https://example.com/broken.mpd
"""


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    monkeypatch.setattr(config_manager, "config", ConfigSection(config_manager.config.to_dict()))


@pytest.fixture
def playlist(tmp_path):
    path = tmp_path / "list.m3u"
    path.write_text(PLAYLIST, encoding="utf-8")
    return path


def test_converts_playlist_to_json(tmp_path, playlist):
    output = tmp_path / "output.json"

    assert run_module.main([str(playlist), "-o", str(output), "--quiet"]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert list(data) == ["ch1"]
    assert data["ch1"]["key1"] == "42424242:41414141"
    assert "key4" not in data["ch1"]


def test_arguments_override_config(tmp_path, playlist):
    output = tmp_path / "output.json"

    run_module.main([str(playlist), "-o", str(output), "--indent", "4", "--workers", "2", "--user-agent", "Box/1.0"])

    assert config_manager.config.get_int("EXTRACT", "max_workers") == 2
    text = output.read_text(encoding="utf-8")
    assert '\n    "ch1": {' in text
    assert json.loads(text)["ch1"]["useragent"] == "Box/1.0"


def test_prompts_for_source_when_missing(tmp_path, playlist, monkeypatch):
    output = tmp_path / "output.json"
    monkeypatch.setattr(run_module, "ask_source", lambda: str(playlist))

    assert run_module.main(["-o", str(output), "--quiet"]) == 0
    assert output.exists()


def test_stdout_output(playlist, capsys):
    assert run_module.main([str(playlist), "-o", "-", "--quiet"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["ch1"]["url"] == "https://example.com/a.mpd"


def test_missing_playlist_is_fatal(tmp_path):
    assert run_module.main([str(tmp_path / "missing.m3u"), "-o", str(tmp_path / "out.json")]) == 1
    assert not (tmp_path / "out.json").exists()


def test_unwritable_output_is_fatal(tmp_path, playlist):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    assert run_module.main([str(playlist), "-o", str(blocker / "out.json")]) == 1
