"""Configuration providers."""

from .provider import APIConfig, ConfigProvider, EnvConfigProvider, ManagerConfig, ServiceConfig

__all__ = ["APIConfig", "ManagerConfig", "ServiceConfig", "ConfigProvider", "EnvConfigProvider"]
