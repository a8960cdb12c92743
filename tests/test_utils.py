# tests/test_utils.py
"""End-to-end tests for utils (load_config, log, verify) with cache/env handling."""

from __future__ import annotations

import json
import os
from importlib import import_module

import pytest

# the package re-exports functions named like these modules, so load the modules themselves
LC = import_module("commons_text.utils.load_config")
LOG = import_module("commons_text.utils.log")
V = import_module("commons_text.utils.verify")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via COMMONS_TEXT_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(LC.DATA_DIR_ENV, str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()


def _write(path, doc, mtime):
    path.write_text(json.dumps(doc), encoding="utf-8")
    os.utime(path, (mtime, mtime))


# ---------- package surface ----------
def test_utils_package_reexports_callables():
    utils = import_module("commons_text.utils")
    assert utils.load_config is LC.load_config
    assert utils.verify is V.verify


# ---------- load_config tests ----------
def test_load_config_cache_hit_while_mtime_unchanged(tmp_data_dir):
    p = tmp_data_dir / "separators.json"
    _write(p, {"separator": "/"}, 1_000_000)
    assert load_config("separators") == {"separator": "/"}

    # same mtime: the parsed document is served from cache
    _write(p, {"separator": "|"}, 1_000_000)
    assert load_config("separators") == {"separator": "/"}

    clear_config_cache()
    assert load_config("separators") == {"separator": "|"}


def test_load_config_cache_miss_after_rewrite(tmp_data_dir):
    p = tmp_data_dir / "separators.json"
    _write(p, {"separator": "/"}, 1_000_000)
    assert load_config("separators") == {"separator": "/"}

    _write(p, {"separator": "|"}, 2_000_000)
    assert load_config("separators") == {"separator": "|"}


def test_load_config_returns_copies(tmp_data_dir):
    _write(tmp_data_dir / "rules.json", {"a": 1}, 1_000_000)
    first = load_config("rules")
    first["a"] = 99
    assert load_config("rules") == {"a": 1}


def test_load_config_accepts_json_suffix(tmp_data_dir):
    (tmp_data_dir / "plain.json").write_text(json.dumps({"k": [1, 2]}), encoding="utf-8")
    assert load_config("plain.json") == {"k": [1, 2]}
    assert load_config("plain", base_dir=tmp_data_dir) == {"k": [1, 2]}


def test_load_config_validator_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d["beta"] = "ok"
        return d

    assert load_config("settings", validator=validator) == {"alpha": 1, "beta": "ok"}
    # the validator worked on a copy
    assert load_config("settings") == {"alpha": 1}

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


@pytest.mark.parametrize("doc", [["a", "b"], "text", 3, None])
def test_load_config_requires_json_object(tmp_data_dir, doc):
    (tmp_data_dir / "arr.json").write_text(json.dumps(doc), encoding="utf-8")
    with pytest.raises(ConfigTypeError, match="expected a JSON object"):
        load_config("arr")


def test_validator_failures_become_parse_errors(tmp_data_dir):
    (tmp_data_dir / "v.json").write_text(json.dumps({"k": 1}), encoding="utf-8")

    def boom(d: dict) -> dict:
        raise KeyError("missing")

    def typed(d: dict) -> dict:
        raise ConfigTypeError("bad shape")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("v", validator=boom)
    with pytest.raises(ConfigTypeError, match="bad shape"):
        load_config("v", validator=typed)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_missing_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv(LC.DATA_DIR_ENV, str(tmp_path / "nope"))
    with pytest.raises(DataDirNotFound):
        load_config("anything")


def test_bundled_data_dir_is_default(monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    rules = load_config("path_rules")
    assert rules["separator"] == "/"


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv(LC.DATA_DIR_ENV, "/previous")
    with LC.temp_data_dir(tmp_path) as ctx:
        assert isinstance(ctx, LC.temp_data_dir)
        assert LC._env_data_dir() == tmp_path.resolve()
    assert LC._env_data_dir() is not None
    assert str(LC._env_data_dir()).endswith("previous")

    monkeypatch.delenv(LC.DATA_DIR_ENV)
    with LC.temp_data_dir(tmp_path):
        pass
    assert LC._env_data_dir() is None


def test_clear_hooks_run_once_per_clear(monkeypatch):
    calls = []

    def hook():
        calls.append(1)

    monkeypatch.setattr(LC, "_CLEAR_HOOKS", [], raising=True)
    LC.register_clear_hook(hook)
    LC.register_clear_hook(hook)  # duplicate ignored
    clear_config_cache()
    assert calls == [1]


# ---------- log.debug tests ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "replace")
    LOG.reload_topics()

    LOG.debug("hello on replace", topic="replace")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on replace" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[bar][WARNING]" in captured.err


def test_log_debug_silent_when_unset(capsys):
    assert LOG.topic_enabled("path") is False
    LOG.debug("nothing", topic="path")
    assert capsys.readouterr().err == ""


def test_log_debug_custom_stream(monkeypatch):
    import io

    monkeypatch.setenv(LOG.ENV_VAR, " Path , replace ")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("to buffer", topic="PATH", stream=buf)
    assert "[path][DEBUG] to buffer" in buf.getvalue()


# ---------- verify ----------
@pytest.mark.parametrize(
    "template,args,expected",
    [
        ("%s must be %s", (1, 2), "1 must be 2"),
        ("no placeholders", (1, 2), "no placeholders [1, 2]"),
        ("%s and %s", (1,), "1 and %s"),
        ("%s", ("a", "b", "c"), "a [b, c]"),
        (None, (), "None"),
        (None, (5,), "None [5]"),
    ],
)
def test_format_message(template, args, expected):
    assert V.format_message(template, *args) == expected


def test_verify_passes_and_fails():
    V.verify(True, "never shown")
    with pytest.raises(V.PreconditionViolation, match="^index 4 out of 3$"):
        V.verify(False, "index %s out of %s", 4, 3)
    with pytest.raises(V.PreconditionViolation):
        V.verify(False)


def test_precondition_violation_is_value_error():
    assert issubclass(V.PreconditionViolation, ValueError)


def test_not_none():
    marker = object()
    assert V.not_none(marker) is marker
    assert V.not_none("") == ""
    with pytest.raises(V.PreconditionViolation, match="non-None"):
        V.not_none(None)
    with pytest.raises(V.PreconditionViolation, match="^name is required$"):
        V.not_none(None, "%s is required", "name")
