from __future__ import annotations

import logging
from pathlib import Path

import pytest

from polibill_app.core import config as app_config
from polibill_app.core.errors import ConfigError
from polibill_app.core.logging_setup import setup_logging


def test_load_config_from_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "polibill.yaml"
    config_file.write_text(
        "storage:\n"
        "  data_dir: /srv/polibill\n"
        "  clients_file: c.txt\n"
        "  strict_records: true\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )

    config = app_config.load_config(config_file)

    assert config.storage.clients_path == Path("/srv/polibill/c.txt")
    assert config.storage.policies_path == Path("/srv/polibill/policies.txt")
    assert config.storage.strict_records is True
    assert config.logging.level == "DEBUG"


def test_missing_or_empty_config_uses_defaults(tmp_path: Path) -> None:
    assert app_config.load_config(tmp_path / "absent.yaml") == app_config.AppConfig()
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert app_config.load_config(empty).storage.payments_file == "payments.txt"


def test_malformed_config_raises(tmp_path: Path) -> None:
    bad_root = tmp_path / "list.yaml"
    bad_root.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        app_config.load_config(bad_root)

    bad_section = tmp_path / "section.yaml"
    bad_section.write_text("storage: nope\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        app_config.load_config(bad_section)


def test_config_path_env_override(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv(app_config.CONFIG_PATH_ENV, str(target))
    assert app_config.resolve_default_config_path() == target


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved:
            root.addHandler(handler)
        root.setLevel(saved_level)
