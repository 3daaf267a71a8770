"""Tests for testgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from testgen.config import ConfigError, LoggingConfig, ServiceConfig, TestGenConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, TestGenConfig)
    assert config.root == tmp_path.resolve()
    assert config.service == ServiceConfig(host="0.0.0.0", port=8080, cors_origins=["*"])
    assert config.logging == LoggingConfig(verbose=False, log_file=None)


def test_load_config_returns_defaults_when_empty(tmp_path: Path) -> None:
    (tmp_path / ".testgen.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.service.port == 8080


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".testgen.yml"
    config_file.write_text(
        """
service:
  host: "127.0.0.1"
  port: 9090
  cors_origins:
    - "http://localhost:5173"
    - "http://localhost:3000"
logging:
  verbose: yes
  log_file: "logs/testgen.log"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.service.host == "127.0.0.1"
    assert config.service.port == 9090
    assert config.service.cors_origins == ["http://localhost:5173", "http://localhost:3000"]
    assert config.logging.verbose is True
    assert config.logging.log_file == tmp_path.resolve() / "logs" / "testgen.log"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".testgen.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".testgen.yml").write_text("service: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_out_of_range_port(tmp_path: Path) -> None:
    (tmp_path / ".testgen.yml").write_text("service:\n  port: 70000\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
