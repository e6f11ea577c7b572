"""Source registry for mapping source modes to source classes."""

from typing import Type

from nowshowing.sources.base import BaseSource, SourceError
from nowshowing.sources.browser import BrowserSource
from nowshowing.sources.http import HttpSource
from nowshowing.sources.serpapi import SerpApiSource

# Registry mapping source mode names to source classes
SOURCE_REGISTRY: dict[str, Type[BaseSource]] = {
    "browser": BrowserSource,
    "http": HttpSource,
    "serpapi": SerpApiSource,
}


def get_source(mode: str) -> BaseSource | None:
    """
    Get a source instance by mode.

    Args:
        mode: The source mode (e.g., "browser", "serpapi")

    Returns:
        Source instance or None if mode not found
    """
    source_class = SOURCE_REGISTRY.get(mode)
    if source_class:
        return source_class()
    return None


__all__ = [
    "SOURCE_REGISTRY",
    "get_source",
    "BaseSource",
    "BrowserSource",
    "HttpSource",
    "SerpApiSource",
    "SourceError",
]
