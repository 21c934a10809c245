from template_service.core.config import Settings
from template_service.main import apply_overrides, parse_args


def test_defaults() -> None:
    settings = Settings()

    assert settings.port == 9090
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.log_level == "INFO"


def test_nested_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("SERVER__PORT", "7000")
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./other.db")
    monkeypatch.setenv("LOGGING__LEVEL", "WARNING")

    settings = Settings()

    assert settings.port == 7000
    assert settings.database_url == "sqlite+aiosqlite:///./other.db"
    assert settings.log_level == "WARNING"


def test_debug_forces_debug_logging() -> None:
    assert Settings(debug=True).log_level == "DEBUG"


def test_command_line_overrides_settings() -> None:
    args = parse_args(["--port", "8123", "--database-url", "sqlite+aiosqlite://", "--log-level", "ERROR"])

    settings = apply_overrides(Settings(), args)

    assert settings.port == 8123
    assert settings.host == "0.0.0.0"
    assert settings.database_url == "sqlite+aiosqlite://"
    assert settings.log_level == "ERROR"


def test_no_overrides_keeps_settings() -> None:
    original = Settings()

    assert apply_overrides(original, parse_args([])) == original
