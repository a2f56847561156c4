# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
import health_probe.config as config_module
from health_probe.config import (
    DEFAULT_HUB_URL,
    DEFAULT_TARGET_URL,
    ProbeConfig,
    load_config,
    override_config,
)


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("target_url: http://app:8080/ready", ".yaml", None),
        (json.dumps({"target_url": "http://app:8080/ready"}), ".json", None),
        ("target_url: http://app:8080/ready\nretries: 3", ".yaml", ValidationError),
        ("target_url: not-a-url", ".yml", ValidationError),
        ("browser: firefox\ntarget_url: http://app:8080/ready", ".yaml", ValidationError),
        ("headless_args: ['']\ntarget_url: http://app:8080/ready", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("target_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ProbeConfig)
        assert cfg.target == "http://app:8080/ready"
        assert cfg.hub == DEFAULT_HUB_URL


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_DEFAULT_CFG", tmp_path / "absent.yaml")
    cfg = load_config(None)
    assert cfg.hub == DEFAULT_HUB_URL
    assert cfg.target == DEFAULT_TARGET_URL
    assert cfg.headless_args == ["--headless=new"]


def test_load_config_reads_default_file(tmp_path, monkeypatch):
    default = tmp_path / "default.yaml"
    default.write_text("hub_url: http://grid:4444/wd/hub/\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "_DEFAULT_CFG", default)
    cfg = load_config(None)
    assert cfg.hub == "http://grid:4444/wd/hub"
    assert cfg.target == DEFAULT_TARGET_URL


def test_packaged_default_file_matches_builtin():
    assert config_module._DEFAULT_CFG.is_file()
    assert load_config(None) == ProbeConfig()


def test_working_directory_config_ignored(tmp_path, monkeypatch):
    # чужой configs/default.yaml (например, от другого проекта) не подхватывается
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "base_url: http://example.com\nwordlists: {}\n", encoding="utf-8"
    )
    cfg = load_config(None)
    assert cfg.target == DEFAULT_TARGET_URL


def test_explicit_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_empty_yaml_gives_defaults(tmp_path):
    cfg = load_config(write_file(tmp_path, "", ".yaml"))
    assert cfg == ProbeConfig()


def test_config_is_frozen():
    cfg = ProbeConfig()
    with pytest.raises(ValidationError):
        cfg.target_url = "http://other/health"


def test_override_config():
    cfg = override_config(ProbeConfig(), hub_url="http://grid:4444/wd/hub", target_url=None)
    assert cfg.hub == "http://grid:4444/wd/hub"
    assert cfg.target == DEFAULT_TARGET_URL


def test_override_config_validates():
    with pytest.raises(ValidationError):
        override_config(ProbeConfig(), target_url="not a url")
