"""Base interface for document sources."""

from abc import ABC, abstractmethod
from typing import Any


class SourceError(Exception):
    """The schedule document could not be obtained."""


class BaseSource(ABC):
    """
    Abstract base class for all document sources.

    A source fetches one raw document (markup, plain text or API pairs) for
    the extraction pipeline. Unlike extractors, sources DO raise: any
    failure is reported as SourceError so the snapshot job can publish an
    annotated empty snapshot instead.
    """

    name: str = "base"

    @abstractmethod
    async def fetch(self) -> Any:
        """
        Fetch today's schedule document.

        Returns:
            Markup string, plain text, or a list of (title, times) pairs

        Raises:
            SourceError: If the document could not be obtained
        """
        pass
