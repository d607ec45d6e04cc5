"""Outbound HTTP infrastructure package."""

from .httpx_fetch_client import HttpxFetchClient

__all__ = ["HttpxFetchClient"]
