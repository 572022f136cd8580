"""Configuration settings for podstatus."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from podstatus.k8s.client import ConnectionMode


class Settings(BaseSettings):
    """Settings loaded from PODSTATUS_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PODSTATUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cluster connection
    connection_mode: ConnectionMode = Field(
        default=ConnectionMode.KUBECONFIG,
        description="How to authenticate against the API server (in-cluster or kubeconfig)",
    )
    kubeconfig_path: str | None = Field(
        default=None, description="Path to the kubeconfig file (default: ~/.kube/config)"
    )
    kube_context: str | None = Field(default=None, description="Kubeconfig context to use")
    request_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Deadline for a single list call, in seconds"
    )

    # Query
    namespace: str = Field(default="default", description="Namespace queried when none is given")

    # Application Settings
    log_level: str = Field(default="INFO", description="Logging level")
    environment: Literal["development", "production"] = Field(
        default="development", description="Environment"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
