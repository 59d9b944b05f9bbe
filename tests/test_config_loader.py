import pytest
from pydantic import ValidationError

from checkout_buttons.utils.config_loader import ButtonConfig, load_buttons_config

ENV_VARS = (
    "STOREFRONT_BASE_URL",
    "STOREFRONT_API_TOKEN",
    "CHECKOUT_BUTTONS_USE_MOCKS",
    "CHECKOUT_BUTTONS_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_yaml_values_are_loaded(tmp_path):
    path = tmp_path / "buttons.yml"
    path.write_text(
        "storefront:\n"
        "  base_url: https://store.example.com\n"
        "  timeout_seconds: 5\n"
        "button:\n"
        "  default_height: 45\n"
        "use_mocks: false\n",
        encoding="utf-8",
    )

    cfg = load_buttons_config(path)

    assert cfg.storefront.base_url == "https://store.example.com"
    assert cfg.storefront.timeout_seconds == 5
    assert cfg.storefront.checkout_path == "/checkout.php"
    assert cfg.button.default_height == 45
    assert cfg.use_mocks is False


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "buttons.yml"
    path.write_text("storefront:\n  base_url: https://yaml.example.com\nuse_mocks: true\n", encoding="utf-8")
    monkeypatch.setenv("STOREFRONT_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("STOREFRONT_API_TOKEN", "secret")
    monkeypatch.setenv("CHECKOUT_BUTTONS_USE_MOCKS", "false")
    monkeypatch.setenv("CHECKOUT_BUTTONS_HTTP_TIMEOUT", "7.5")

    cfg = load_buttons_config(path)

    assert cfg.storefront.base_url == "https://env.example.com"
    assert cfg.storefront.api_token == "secret"
    assert cfg.storefront.timeout_seconds == 7.5
    assert cfg.use_mocks is False


def test_empty_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "buttons.yml"
    path.write_text("", encoding="utf-8")

    cfg = load_buttons_config(path)

    assert cfg.use_mocks is True
    assert cfg.button.default_shape == "rect"
    assert cfg.button.messaging_placement == "cart"


def test_missing_explicit_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_buttons_config(tmp_path / "missing.yml")


def test_invalid_values_fail_validation(tmp_path):
    path = tmp_path / "buttons.yml"
    path.write_text("storefront:\n  timeout_seconds: 0\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_buttons_config(path)


def test_default_height_must_sit_within_bounds():
    with pytest.raises(ValidationError):
        ButtonConfig(default_height=60, max_height=55)
