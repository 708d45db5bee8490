import pytest

from productcrud.config import Config, load_config


def _write(tmp_path, text, name="config.yaml"):
    (tmp_path / name).write_text(text, encoding="utf-8")


def test_load_reads_nested_values(tmp_path):
    _write(tmp_path, "server:\n  port: 8080\ndb:\n  host: localhost\n")
    config = load_config(tmp_path, environ={})
    assert config.get("server.port") == 8080
    assert config.get("db.host") == "localhost"


def test_environment_overrides_file(tmp_path):
    _write(tmp_path, "server:\n  port: 8080\n")
    config = load_config(tmp_path, environ={"SERVER_PORT": "9000"})
    assert config.get("server.port") == "9000"


def test_empty_environment_value_is_ignored(tmp_path):
    _write(tmp_path, "server:\n  port: 8080\n")
    config = load_config(tmp_path, environ={"SERVER_PORT": ""})
    assert config.get("server.port") == 8080


def test_missing_key_returns_default(tmp_path):
    _write(tmp_path, "server:\n  port: 8080\n")
    config = load_config(tmp_path, environ={})
    assert config.get("db.user", "fallback") == "fallback"
    assert config.get("server.port.extra") is None


def test_keys_are_case_insensitive():
    config = Config({"Server": {"Port": 1}}, {})
    assert config.get("SERVER.port") == 1


def test_yml_extension_is_found(tmp_path):
    _write(tmp_path, "db:\n  database: shop\n", name="config.yml")
    assert load_config(tmp_path, environ={}).get("db.database") == "shop"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path, environ={})


def test_non_mapping_file_raises(tmp_path):
    _write(tmp_path, "- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(tmp_path, environ={})