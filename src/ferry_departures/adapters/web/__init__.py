"""Web adapters."""

from ferry_departures.adapters.web.http_api_adapter import HttpApiAdapter

__all__ = ["HttpApiAdapter"]
