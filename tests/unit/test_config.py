from __future__ import annotations

from pathlib import Path

import pytest

from src.utils.config import DEFAULT_FIELDS, load_source_config, load_yaml


def test_project_default_config(monkeypatch) -> None:
    monkeypatch.delenv("COUNTRY_TABLE_CONFIG", raising=False)
    cfg = load_source_config()
    assert cfg.url == "https://restcountries.com/v3.1/all"
    assert cfg.timeout_seconds == 30.0
    assert cfg.fields == DEFAULT_FIELDS
    assert cfg.local_path is not None
    assert Path(cfg.local_path).is_absolute()
    assert cfg.local_path.endswith("countries.json")


def test_explicit_path_wins_over_env(tmp_path, monkeypatch) -> None:
    env_cfg = tmp_path / "env.yaml"
    env_cfg.write_text("source:\n  url: https://env.example/all\n  timeout_seconds: 5\n", encoding="utf-8")
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text(
        "source:\n  url: https://explicit.example/all\n  timeout_seconds: 2.5\n  fields: [name, flags]\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("COUNTRY_TABLE_CONFIG", str(env_cfg))

    assert load_source_config().url == "https://env.example/all"

    cfg = load_source_config(str(explicit))
    assert cfg.url == "https://explicit.example/all"
    assert cfg.timeout_seconds == 2.5
    assert cfg.fields == ("name", "flags")
    assert cfg.local_path is None


def test_absolute_local_path_kept(tmp_path) -> None:
    data = tmp_path / "countries.json"
    p = tmp_path / "cfg.yaml"
    p.write_text(
        f"source:\n  url: https://x.example/all\n  timeout_seconds: 1\n  local_path: {data}\n",
        encoding="utf-8",
    )
    assert load_source_config(str(p)).local_path == str(data)


def test_missing_keys_raise(tmp_path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("source:\n  fields: [name]\n", encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        load_source_config(str(p))
    assert "source.url" in str(exc.value)
    assert "source.timeout_seconds" in str(exc.value)


def test_load_yaml_empty_document(tmp_path) -> None:
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_yaml(p) == {}
