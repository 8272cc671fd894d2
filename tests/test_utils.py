# tests/test_utils.py
"""Tests for utils (load_config, log): cache, env resolution, coercion modes, errors."""

from __future__ import annotations

import importlib
import json
import os
from types import SimpleNamespace

import pytest

LC = importlib.import_module("grapheme_porter.utils.load_config")
from grapheme_porter.utils import log as LOG
from grapheme_porter.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)


# ---------- load_config tests ----------
def test_load_config_set_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "protected_words.json"
    p.write_text(json.dumps(["news", "gas", 3]), encoding="utf-8")

    out1 = load_config("protected_words", mode="set")
    assert out1 == frozenset({"news", "gas", "3"})

    # same mtime → cached value even though the content changed
    st = p.stat()
    p.write_text(json.dumps(["changed"]), encoding="utf-8")
    os.utime(p, ns=(st.st_atime_ns, st.st_mtime_ns))
    assert load_config("protected_words", mode="set") == out1

    clear_config_cache()
    assert load_config("protected_words", mode="set") == frozenset({"changed"})


def test_load_config_raw_is_default_mode(tmp_data_dir):
    (tmp_data_dir / "anything.json").write_text(json.dumps({"a": [1, 2]}), encoding="utf-8")
    assert load_config("anything") == {"a": [1, 2]}
    assert load_config("anything.json") == {"a": [1, 2]}


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "stemmer.json"
    conf.write_text(json.dumps({"lowercase": True}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["checked"] = True
        return d

    out = load_config("stemmer", mode="validated_dict", validator=validator)
    assert out == {"lowercase": True, "checked": True}

    (tmp_data_dir / "oops.json").write_text(json.dumps({"not": "alist"}), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="set")

    (tmp_data_dir / "list.json").write_text(json.dumps(["a"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("list", mode="validated_dict")

    (tmp_data_dir / "nested.json").write_text(json.dumps([["a"]]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("nested", mode="set")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_validator_failure_is_parse_error(tmp_data_dir):
    (tmp_data_dir / "stemmer.json").write_text(json.dumps({}), encoding="utf-8")

    def validator(d: dict) -> dict:
        raise KeyError("lowercase")

    with pytest.raises(ConfigParseError):
        load_config("stemmer", mode="validated_dict", validator=validator)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config("x", mode="bogus")  # type: ignore[arg-type]


def test_load_config_allow_comments_with_fake_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text('{"a":1, /*c*/ "b":2, }', encoding="utf-8")

    fake_json5 = SimpleNamespace(load=lambda f: {"a": 1, "b": 2})
    monkeypatch.setattr(LC, "_json5", fake_json5)

    assert load_config("cmt", mode="raw", allow_comments=True) == {"a": 1, "b": 2}


def test_load_config_allow_comments_without_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(LC, "_json5", None)
    with pytest.raises(ConfigParseError):
        load_config("cmt", allow_comments=True)


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_default_data_dir_not_found(tmp_path):
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    if any(p.is_dir() for p in LC._candidate_data_dirs(start)):
        pytest.skip("a data/ directory exists above tmp_path")
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir(start)


def test_temp_data_dir_restores_env(tmp_path):
    (tmp_path / "x.json").write_text(json.dumps({"k": "v"}), encoding="utf-8")
    with temp_data_dir(tmp_path):
        assert os.environ["DATA_DIR"] == str(tmp_path)
        assert load_config("x") == {"k": "v"}
    assert "DATA_DIR" not in os.environ


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("PORTER_DEBUG_TOPICS", "token")
    LOG.reload_topics()

    LOG.debug("hello on token", topic="token")
    LOG.debug("should be silent", topic="settings")

    captured = capsys.readouterr()
    assert "hello on token" in captured.err
    assert "[token] hello on token" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("PORTER_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    for topic in sorted(LOG.TOPICS):
        LOG.debug(f"m-{topic}", topic=topic)

    err = capsys.readouterr().err
    assert all(f"[{t}] m-{t}" in err for t in LOG.TOPICS)


def test_log_debug_ignores_unknown_env_topics(monkeypatch):
    monkeypatch.setenv("PORTER_DEBUG_TOPICS", " Token , nonsense ")
    LOG.reload_topics()
    assert LOG.topic_enabled("token")
    assert not LOG.topic_enabled("nonsense")


def test_log_debug_rejects_unknown_topic():
    with pytest.raises(ValueError, match="unknown debug topic"):
        LOG.debug("typo", topic="tokens")


def test_log_debug_custom_stream(monkeypatch):
    import io

    monkeypatch.setenv("PORTER_DEBUG_TOPICS", "cli")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("to buffer", topic="cli", stream=buf)
    assert buf.getvalue().rstrip().endswith("[cli] to buffer")


def test_log_debug_silent_when_unset(capsys):
    LOG.debug("nothing", topic="token")
    assert capsys.readouterr().err == ""
    assert not LOG.topic_enabled("token")
