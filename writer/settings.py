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

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    IMAGE_FOLDER: str = "portfolio-blog-images"

    # GitHub
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REPO: str = "siddoinghisjob/blog-code"
    GITHUB_BRANCH: str = "main"
    CONTENT_DIR: str = "data/content"

    # Blog
    RECOMMENDATIONS_URL: str = (
        "https://raw.githubusercontent.com/siddoinghisjob/blog-code"
        "/refs/heads/main/data/blog.json"
    )

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    WRITER_API_KEY: str = ""

    @property
    def github_owner(self) -> str:
        return self.GITHUB_REPO.split("/", 1)[0]

    @property
    def github_repo_name(self) -> str:
        return self.GITHUB_REPO.split("/", 1)[-1]


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
