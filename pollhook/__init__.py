"""Webhook payload caching, long polling and request value extraction."""

__version__ = "0.1.0"
__all__ = ["cache", "data_config", "data_polling", "data_receiver", "extractors", "polling_config"]