"""Test settings loading and command-line overrides."""
import pytest
from messageboard.main import parse_args
from messageboard.utils.config import Settings, load_settings


def test_defaults():
    s = load_settings({})
    assert s == Settings()
    assert s.host == "127.0.0.1"
    assert s.port == 3000
    assert s.static_dir == "client/build"


def test_environment_overrides():
    s = load_settings({
        "MESSAGEBOARD_HOST": "0.0.0.0",
        "MESSAGEBOARD_PORT": "8080",
        "MESSAGEBOARD_STATIC_DIR": "/srv/client",
        "MESSAGEBOARD_LOG_LEVEL": "debug",
        "MESSAGEBOARD_LOG_FORMAT": "json",
        "UNRELATED": "ignored",
    })
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.static_dir == "/srv/client"
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"


@pytest.mark.parametrize("env", [
    {"MESSAGEBOARD_PORT": "http"},
    {"MESSAGEBOARD_PORT": "0"},
    {"MESSAGEBOARD_PORT": "70000"},
    {"MESSAGEBOARD_LOG_LEVEL": "LOUD"},
    {"MESSAGEBOARD_LOG_FORMAT": "xml"},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        load_settings(env)


def test_flags_override_environment():
    env_settings = load_settings({"MESSAGEBOARD_PORT": "8080", "MESSAGEBOARD_HOST": "10.0.0.1"})
    s = parse_args(["--port", "9000", "--log-level", "warning"], defaults=env_settings)
    assert s.port == 9000
    assert s.host == "10.0.0.1"
    assert s.log_level == "WARNING"


def test_flags_default_to_environment():
    env_settings = load_settings({"MESSAGEBOARD_STATIC_DIR": "dist"})
    assert parse_args([], defaults=env_settings) == env_settings


def test_unknown_log_format_rejected():
    from messageboard.utils.logging import configure_logging
    with pytest.raises(ValueError):
        configure_logging("INFO", "xml")


def test_app_context_added():
    from messageboard.utils.logging import add_app_context
    assert add_app_context(None, "info", {"event": "x"}) == {"event": "x", "app": "messageboard"}
