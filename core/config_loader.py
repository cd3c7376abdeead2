import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field

# 25 miles
DEFAULT_SEARCH_RADIUS_METERS = 40233.6


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///needmatch.db"
    echo: bool = False


class MatchingConfig(BaseModel):
    """
    Configuration for the MatcherService.

    A need is eligible for a resource only when its owner lies within
    search_radius_meters of the resource owner (inclusive).
    """
    search_radius_meters: float = Field(default=DEFAULT_SEARCH_RADIUS_METERS, gt=0)


class CatalogConfig(BaseModel):
    """Where the category/resource/organization catalog lives."""
    # Relative paths are resolved against the directory of config.yaml
    schema_file: str = "schema.yaml"


class ConversationConfig(BaseModel):
    # Reply that ends the provide flow at resource selection without side effects
    none_token: str = "none"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    conversation: ConversationConfig = Field(default_factory=ConversationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Directory of the loaded config file, used to resolve relative paths
    base_dir: Optional[str] = None

    def resolve_path(self, path: str) -> str:
        if os.path.isabs(path) or not self.base_dir:
            return path
        return os.path.join(self.base_dir, path)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), use the repo root copy
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if 'database' not in data or data['database'] is None:
            data['database'] = {}
        data['database']['url'] = env_db_url

    # Allow env var override for the match radius
    env_radius = os.environ.get("MATCH_RADIUS_METERS")
    if env_radius:
        if 'matching' not in data or data['matching'] is None:
            data['matching'] = {}
        data['matching']['search_radius_meters'] = float(env_radius)

    data['base_dir'] = os.path.dirname(os.path.abspath(config_path))
    return AppConfig(**data)
