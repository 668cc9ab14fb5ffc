"""Storage interface (port) for search results and cloned repositories.

This is the port in hexagonal architecture that the infrastructure layer implements.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List


class ISearchResultStorage(ABC):
    """Abstract interface for the on-disk output tree."""

    @property
    @abstractmethod
    def root(self) -> Path:
        """Directory all artifacts live under."""
        pass

    @abstractmethod
    def has_page(self, page: int) -> bool:
        """Whether the search results for ``page`` are already stored."""
        pass

    @abstractmethod
    def save_page(self, page: int, items: List[Dict[str, Any]]) -> None:
        """Persist the raw search result items of ``page``."""
        pass

    @abstractmethod
    def load_page(self, page: int) -> List[Dict[str, Any]]:
        """Load the raw search result items of ``page``."""
        pass

    @abstractmethod
    def clone_path(self, page: int, directory_name: str) -> Path:
        """Destination directory of a repository cloned from ``page``."""
        pass

    @abstractmethod
    def has_clone(self, page: int, directory_name: str) -> bool:
        """Whether a repository from ``page`` is already cloned."""
        pass

    @abstractmethod
    def list_cloned(self, page: int) -> List[str]:
        """Names of the repository directories cloned for ``page``."""
        pass

    @abstractmethod
    def count_cloned_pages(self) -> int:
        """Number of page directories holding cloned repositories."""
        pass
