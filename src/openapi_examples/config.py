"""Application configuration models."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOC_COMMENTS_PATH = Path(__file__).resolve().parent / "docs" / "route_comments.json"


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment & server
    environment: str = Field(default="production", description="Hosting environment name")
    log_level: str = Field(default="INFO", description="Root logging level for the CLIs")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    https_redirect: bool = Field(default=False, description="Redirect plain HTTP requests to HTTPS")
    document_in_development_only: bool = Field(
        default=False,
        description="Serve the API description document only in development",
    )

    # API description metadata
    document_name: str = Field(default="v1", description="Name segment of the document URL")
    api_title: str = Field(default="My API")
    api_version: str = Field(default="1")
    api_description: str = Field(default="A simple example FastAPI web API")
    contact_name: str = Field(default="Your Name")
    contact_email: str = Field(default="you@example.com")
    contact_url: str = Field(default="https://example.com")
    license_name: str = Field(default="Use under LICX")
    license_url: str = Field(default="https://example.com/license")
    terms_of_service_url: str = Field(default="https://example.com/tos")

    doc_comments_path: Path = Field(
        default=DEFAULT_DOC_COMMENTS_PATH,
        description="JSON file holding the per-route documentation comments",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    @property
    def serves_document(self) -> bool:
        return self.is_development or not self.document_in_development_only

    @property
    def openapi_url(self) -> str:
        """URL the API description document is served from."""
        return f"/swagger/{self.document_name}/swagger.json"

    @property
    def docs_title(self) -> str:
        return f"{self.api_title} {self.document_name.upper()}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
