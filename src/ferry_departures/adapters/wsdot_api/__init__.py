"""WSDOT Ferries API adapters."""

from ferry_departures.adapters.wsdot_api.wsdot_live_feed_source import WsdotLiveFeedSource

__all__ = ["WsdotLiveFeedSource"]
