import pytest
from pydantic import ValidationError

from catalog_client.utils.config_loader import CatalogConfig, load_catalog_config


def write_config(tmp_path, text):
    path = tmp_path / "catalog_config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_catalog_section(tmp_path):
    path = write_config(
        tmp_path,
        "catalog:\n"
        "  base_url: https://shop.example\n"
        "  timeout_seconds: 12.5\n"
        "  default_headers:\n"
        "    X-Client: tests\n",
    )

    config = load_catalog_config(path, use_env=False)

    assert config.base_url == "https://shop.example"
    assert config.timeout_seconds == 12.5
    assert config.default_headers == {"X-Client": "tests"}
    assert config.api_key == ""


def test_empty_file_gives_defaults(tmp_path):
    config = load_catalog_config(write_config(tmp_path, ""), use_env=False)

    assert config == CatalogConfig()


def test_empty_catalog_section_gives_defaults(tmp_path):
    config = load_catalog_config(write_config(tmp_path, "catalog:\n"), use_env=False)

    assert config == CatalogConfig()


@pytest.mark.parametrize("text", ["- a\n- b\n", "just a string\n", "42\n", "catalog: [1, 2]\n"])
def test_non_mapping_config_raises(tmp_path, text):
    with pytest.raises(ValueError, match="must be a mapping"):
        load_catalog_config(write_config(tmp_path, text), use_env=False)


def test_environment_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_API_URL", "https://env.example")
    monkeypatch.setenv("CATALOG_API_KEY", "env-key")
    monkeypatch.setenv("CATALOG_TIMEOUT_SECONDS", "3")
    path = write_config(tmp_path, "catalog:\n  base_url: https://shop.example\n")

    config = load_catalog_config(path)

    assert config.base_url == "https://env.example"
    assert config.api_key == "env-key"
    assert config.timeout_seconds == 3.0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog_config(tmp_path / "nope.yml")


def test_invalid_timeout_raises(tmp_path):
    path = write_config(tmp_path, "catalog:\n  timeout_seconds: -1\n")

    with pytest.raises(ValidationError):
        load_catalog_config(path, use_env=False)


def test_bundled_config_loads():
    config = load_catalog_config(use_env=False)

    assert config.base_url == "https://dummyjson.com"
    assert config.default_headers["Accept"] == "application/json"
