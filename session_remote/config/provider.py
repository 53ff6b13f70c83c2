"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

SESSION_STORES = ("memory", "redis")
SAMESITE_VALUES = ("strict", "lax", "none")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    log_level: str


@dataclass
class ManagerConfig:
    """Session manager configuration."""
    store: str = "memory"
    expires: int = 3600
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: Optional[str] = None
    cookie_name: str = "session"
    cookie_domain: Optional[str] = None
    cookie_path: Optional[str] = "/"
    cookie_secure: bool = True
    cookie_http_only: bool = True
    cookie_samesite: Optional[str] = "lax"

    def __post_init__(self):
        if self.store not in SESSION_STORES:
            raise ValueError(
                f"Unknown session store {self.store!r}, expected one of: {', '.join(SESSION_STORES)}"
            )
        if self.cookie_samesite is not None and self.cookie_samesite.lower() not in SAMESITE_VALUES:
            raise ValueError(
                f"Invalid cookie samesite {self.cookie_samesite!r}, expected one of: {', '.join(SAMESITE_VALUES)}"
            )
        if self.expires < 0:
            raise ValueError("Session expiry cannot be negative")

    @property
    def redis_url(self) -> str:
        """Redis URL without password (password is passed separately)."""
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"


@dataclass
class ServiceConfig:
    """Remote service configuration."""
    validate_res: bool = False


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...

    def get_manager_config(self) -> ManagerConfig:
        """Get session manager configuration."""
        ...

    def get_service_config(self) -> ServiceConfig:
        """Get remote service configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=_env_int("API_PORT", "8080"),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=_env_bool("API_DEBUG", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def get_manager_config(self) -> ManagerConfig:
        """Get session manager configuration from environment variables."""
        # Redis port might be in tcp://host:port format from K8s
        redis_port_env = os.getenv("REDIS_PORT", "6379")
        if redis_port_env.startswith("tcp://"):
            redis_port = int(redis_port_env.split(":")[-1])
        else:
            redis_port = _env_int("REDIS_PORT", "6379")

        samesite = os.getenv("COOKIE_SAMESITE", "lax")

        return ManagerConfig(
            store=os.getenv("SESSION_STORE", "memory").lower(),
            expires=_env_int("SESSION_EXPIRES", "3600"),
            redis_host=os.getenv("REDIS_HOST", "localhost"),
            redis_port=redis_port,
            redis_db=_env_int("REDIS_DB", "0"),
            redis_password=os.getenv("REDIS_PASSWORD"),
            cookie_name=os.getenv("COOKIE_NAME", "session"),
            cookie_domain=os.getenv("COOKIE_DOMAIN") or None,
            cookie_path=os.getenv("COOKIE_PATH", "/") or None,
            cookie_secure=_env_bool("COOKIE_SECURE", "true"),
            cookie_http_only=_env_bool("COOKIE_HTTP_ONLY", "true"),
            cookie_samesite=samesite or None,
        )

    def get_service_config(self) -> ServiceConfig:
        """Get remote service configuration from environment variables."""
        return ServiceConfig(validate_res=_env_bool("VALIDATE_RESPONSES", "false"))
