"""Repository fetcher interface (port) for materializing repositories on disk."""
from abc import ABC, abstractmethod
from pathlib import Path


class IRepositoryFetcher(ABC):
    """Abstract interface for copying a remote repository to a local directory."""

    @abstractmethod
    async def fetch(self, url: str, destination: Path) -> None:
        """Fetch the repository at ``url`` into ``destination``.

        Raises on failure; a failed fetch must not be reported as success.
        """
        pass
