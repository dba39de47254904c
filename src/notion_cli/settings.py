import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from notion.errors import ConfigurationError
from notion.properties import DEFAULT_TITLE_PROPERTY

load_dotenv()


def _env(key: str, default: Optional[str] = None):
    return lambda: os.getenv(key, default)


class Settings(BaseModel):
    """Runtime configuration, read from the environment when constructed."""

    model_config = ConfigDict(validate_default=True)

    notion_token: Optional[str] = Field(default_factory=_env("NOTION_TOKEN"))
    notion_version: str = Field(default_factory=_env("NOTION_VERSION", "2022-06-28"))
    api_base: str = Field(default_factory=_env("NOTION_API_BASE", "https://api.notion.com/v1"))
    # name of the title property new entries are created with
    title_property: str = Field(default_factory=_env("NOTION_TITLE_PROPERTY", DEFAULT_TITLE_PROPERTY))
    http_timeout: float = Field(default_factory=_env("NOTION_HTTP_TIMEOUT", "30"), gt=0)


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
