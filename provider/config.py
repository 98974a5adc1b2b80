"""Provider configuration using pydantic-settings with env var and YAML file support.

Env vars (EMBY_PROXY_ prefix) take precedence over YAML config file values.
Required: EMBY_PROXY_EMBY_URL, EMBY_PROXY_EMBY_API_KEY — missing either causes an immediate exit.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import pydantic
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ENV_PREFIX = "EMBY_PROXY_"
_YAML_CONFIG_PATH = "/config/provider.yml"


class ProviderSettings(BaseSettings):
    """Emby proxy provider configuration.

    Precedence (highest to lowest):
    1. EMBY_PROXY_-prefixed environment variables
    2. YAML config file at /config/provider.yml (skipped when absent)
    3. Defaults defined below
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        yaml_file=_YAML_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    # Required, no defaults; validation will fail and cause a clean exit
    emby_url: str
    emby_api_key: str

    # Optional with sensible defaults
    request_timeout: float = Field(default=10.0, gt=0, le=300.0)
    # Distinct from Emby's own 8096 (http) and 8920 (https)
    provider_port: int = 8097
    log_level: str = "info"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Return sources in priority order: env > YAML > init (defaults)."""
        return (env_settings, YamlConfigSettingsSource(settings_cls), init_settings)


@lru_cache(maxsize=1)
def get_settings() -> ProviderSettings:
    """Return the cached ProviderSettings instance.

    Exits with a helpful error message if required settings are missing.
    """
    try:
        return ProviderSettings()
    except pydantic.ValidationError as exc:
        missing: list[str] = []
        for error in exc.errors():
            if error.get("type") == "missing":
                loc = error.get("loc", ())
                if loc:
                    missing.append(f"{ENV_PREFIX}{str(loc[0]).upper()}")

        if missing:
            names = ", ".join(missing)
            print(
                f"\nMissing required configuration: {names}\n"
                f"Set these as environment variables or add them to {_YAML_CONFIG_PATH}\n"
                f"Example:\n"
                f"  export {ENV_PREFIX}EMBY_URL=http://localhost:8096\n"
                f"  export {ENV_PREFIX}EMBY_API_KEY=your-api-key\n",
                file=sys.stderr,
            )
        else:
            print(
                f"\nConfiguration error:\n{exc}\n",
                file=sys.stderr,
            )
        sys.exit(1)
