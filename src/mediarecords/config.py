from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # e.g. mongodb://localhost:27017/mediarecords, database name is the URL path
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    debug: bool = False
    cors_origins: list[str] = ["*"]  # Any origin by default; set an empty list to disable CORS
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    max_upload_size: int = 16 * 1024 * 1024  # Upload limit in bytes
    # Build metadata injected during Docker build via environment variables
    git_commit_hash: str = "unknown"
    git_commit_date: str = "unknown"
    build_time: str = "unknown"

    model_config = {
        "env_file": [".env"],
        "env_prefix": "MEDIARECORDS_",
        "extra": "ignore",
    }
