# 19.10.26

import json

from M3UJson.source.writer import dump_streams, write_streams
from M3UJson.source.utils.object import StreamRecord


def make_streams():
    return {
        "ch1": StreamRecord(identifier="ch1", url="https://example.com/a.mpd", key1="42424242:41414141"),
        "ch2": StreamRecord(
            identifier="ch2", url="https://example.com/b.mpd",
            key1="01:02", key2="03:04", key3="05:06", key4="07:08", user_agent="Custom/1.0"
        ),
    }


def test_key4_omitted_only_when_empty():
    data = json.loads(dump_streams(make_streams(), indent=2))

    assert "key4" not in data["ch1"]
    assert data["ch1"]["key2"] == ""
    assert data["ch1"]["key3"] == ""
    assert data["ch2"]["key4"] == "07:08"


def test_serialized_field_names_and_defaults():
    data = json.loads(dump_streams(make_streams(), indent=2))

    assert data["ch2"] == {
        "url": "https://example.com/b.mpd",
        "key1": "01:02",
        "key2": "03:04",
        "key3": "05:06",
        "key4": "07:08",
        "useragent": "Custom/1.0",
        "authorization": "",
        "proxy": "",
        "shaka-packager": False,
        "resolution": "1280",
    }


def test_in_memory_record_keeps_empty_key4():
    record = make_streams()["ch1"]

    assert record.key4 == ""
    assert "key4" not in record.to_dict()


def test_indentation_and_unicode_preserved():
    streams = {"café": StreamRecord(identifier="café", url="https://example.com/c.mpd")}

    payload = dump_streams(streams, indent=4, ensure_ascii=False)

    assert '\n    "café": {' in payload
    assert '\n        "url"' in payload


def test_write_streams_to_file(tmp_path):
    destination = tmp_path / "nested" / "out.json"

    written = write_streams(make_streams(), str(destination), indent=2)

    assert written == str(destination)
    data = json.loads(destination.read_text(encoding="utf-8"))
    assert list(data) == ["ch1", "ch2"]


def test_write_streams_to_stdout(capsys):
    assert write_streams(make_streams(), "-", indent=2) == "-"

    data = json.loads(capsys.readouterr().out)
    assert data["ch1"]["url"] == "https://example.com/a.mpd"
