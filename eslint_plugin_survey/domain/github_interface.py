"""GitHub API interface (port) for searching repositories.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IGitHubSearchClient(ABC):
    """Abstract interface for GitHub repository search."""

    @abstractmethod
    async def search_repositories(self, page: int, per_page: int) -> List[Dict[str, Any]]:
        """Fetch one page of search results.

        Args:
            page: Page number (1-indexed)
            per_page: Results per page

        Returns:
            Raw search result items, exactly as returned by the API
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
