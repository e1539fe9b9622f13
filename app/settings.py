from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content source: "filesystem" or "couchdb"
    CONTENT_SOURCE: str = "filesystem"
    CONTENT_DIR: str = "content"

    # CouchDB
    COUCHDB_HOST: str = "localhost"
    COUCHDB_PORT: int = 5984
    COUCHDB_USERNAME: str = "admin"
    COUCHDB_PASSWORD: str = ""
    COUCHDB_DATABASE: str = "obsidian_db"

    # Blog
    BLOG_PREFIX: str = "blog/"
    IMAGE_BASE_URL: str = "http://localhost:8000/images"
    POSTS_BASE: str = "/posts"
    POSTS_PER_PAGE: int = 10
    INCLUDE_DRAFTS: bool = False

    # Site metadata
    SITE_TITLE: str = "Blog"
    SITE_DESCRIPTION: str = ""

    # Build
    OUTPUT_DIR: str = "public"

    # "development" enables prop type warnings
    ENVIRONMENT: str = "production"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def couchdb_url(self) -> str:
        return f"http://{self.COUCHDB_USERNAME}:{self.COUCHDB_PASSWORD}@{self.COUCHDB_HOST}:{self.COUCHDB_PORT}"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
