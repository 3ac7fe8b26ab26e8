"""Configuration adapters."""

from ferry_departures.adapters.config.app_config import AppConfig
from ferry_departures.adapters.config.route_catalog_loader import RouteCatalogLoader

__all__ = ["AppConfig", "RouteCatalogLoader"]
