"""Application configuration via pydantic-settings.

Two snapshots are produced at launch and never mutated afterwards:

- ``StartupConfig``: TLS options, debug flag and the CSP WebSocket override.
- ``AppConfig``: UI settings (port, login wallpaper), package info and the
  filesystem root the static bundle is served from.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from uix import __version__
from uix.errors import ConfigError

# Repository layout: backend/uix/config.py -> <root>/frontend
_ROOT_DIR = Path(__file__).resolve().parent.parent.parent
_DEFAULT_BASE_PATH = _ROOT_DIR / "frontend"

DEFAULT_PORT = 8080


class HttpsOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyfile: str
    certfile: str


class StartupConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UIX_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    https_options: Optional[HttpsOptions] = None
    debug: bool = False
    # Appended verbatim to the connect-src directive
    csp_ws_override: Optional[str] = None


class UiSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    port: int = DEFAULT_PORT
    login_wallpaper: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("loginWallpaper", "login_wallpaper"),
    )

    @field_validator("port", mode="before")
    @classmethod
    def _default_port(cls, value):
        # 0 / null / "" all mean "use the default"
        if value in (None, "", 0, "0"):
            return DEFAULT_PORT
        return value

    @field_validator("login_wallpaper")
    @classmethod
    def _blank_wallpaper(cls, value):
        return value or None


class PackageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = __version__


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UIX_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    ui: UiSettings = Field(default_factory=UiSettings)
    package: PackageInfo = Field(default_factory=PackageInfo)
    base_path: Path = _DEFAULT_BASE_PATH

    @field_validator("base_path")
    @classmethod
    def _absolute_base_path(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # A JSON config file (model_config["json_file"]) beats the environment
        return (
            init_settings,
            JsonConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @property
    def public_dir(self) -> Path:
        return self.base_path / "public"

    @property
    def shell_document(self) -> Path:
        return self.public_dir / "index.html"

    @property
    def default_wallpaper(self) -> Path:
        return self.public_dir / "assets" / "snapshot.jpg"


def load_startup_config() -> StartupConfig:
    """Build the startup snapshot from the environment.

    Raises ConfigError when values are invalid or TLS files are missing.
    """
    try:
        startup = StartupConfig()
    except ValidationError as e:
        raise ConfigError(f"Invalid startup configuration: {e}") from e

    if startup.https_options:
        for label, path in (
            ("key", startup.https_options.keyfile),
            ("certificate", startup.https_options.certfile),
        ):
            if not Path(path).is_file():
                raise ConfigError(f"TLS {label} file does not exist: {path}")
    return startup


def load_app_config(config_path: Optional[str | Path] = None) -> AppConfig:
    """Build the application config from an optional JSON file plus environment.

    Values from the file (keys ``ui`` and ``base_path``) take precedence
    over environment variables.
    """
    settings_cls = AppConfig
    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file does not exist: {path}")

        class FileAppConfig(AppConfig):
            model_config = SettingsConfigDict(json_file=path, json_file_encoding="utf-8")

        settings_cls = FileAppConfig

    try:
        config = settings_cls()
    except OSError as e:
        raise ConfigError(f"Unable to read config file {config_path}: {e}") from e
    except (ValueError, TypeError) as e:
        # ValidationError and json.JSONDecodeError are both ValueErrors
        raise ConfigError(f"Invalid application configuration: {e}") from e

    if not config.public_dir.is_dir():
        raise ConfigError(f"Static bundle directory does not exist: {config.public_dir}")
    return config
