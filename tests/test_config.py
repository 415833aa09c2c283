"""Tests for app.config – settings loading."""

import json
import logging

from app.config import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "nope.json")
    assert s == Settings()
    assert s.text_size_options == [10, 25, 50, 100]
    assert s.time_limit_options == [15, 30, 60, 120]


def test_overrides(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"default_time_limit": 60, "abort_key": "F2"}), encoding="utf-8")
    s = load_settings(p)
    assert s.default_time_limit == 60
    assert s.abort_key == "F2"
    assert s.default_text_size == 50


def test_unknown_keys_warned(tmp_path, caplog):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        s = load_settings(p)
    assert s == Settings()
    assert "colour" in caplog.text


def test_broken_json_falls_back(tmp_path, caplog):
    p = tmp_path / "settings.json"
    p.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        s = load_settings(p)
    assert s == Settings()
    assert "Failed to read settings" in caplog.text


def test_non_object_falls_back(tmp_path):
    p = tmp_path / "settings.json"
    p.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(p) == Settings()


def test_wrongly_typed_values_keep_defaults(tmp_path, caplog):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({
        "text_size_options": 50,
        "time_limit_options": [15, "30"],
        "default_text_size": True,
        "abort_key": 7,
        "default_time_limit": 45,
    }), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        s = load_settings(p)
    assert s.text_size_options == [10, 25, 50, 100]
    assert s.time_limit_options == [15, 30, 60, 120]
    assert s.default_text_size == 50
    assert s.abort_key == "Escape"
    assert s.default_time_limit == 45
    assert "text_size_options" in caplog.text
