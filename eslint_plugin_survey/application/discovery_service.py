"""Discovery service orchestrating the search and clone stage."""
import asyncio
import logging
import time
from typing import Any, Dict, List, Tuple
from eslint_plugin_survey.domain.fetcher_interface import IRepositoryFetcher
from eslint_plugin_survey.domain.github_interface import IGitHubSearchClient
from eslint_plugin_survey.domain.models import DiscoveryMetrics, RepositoryRecord
from eslint_plugin_survey.domain.storage_interface import ISearchResultStorage


logger = logging.getLogger(__name__)


class DiscoveryService:
    """Application service for discovering and cloning ESLint plugins.

    Coordinates the search client, the storage and the fetcher. Every step is
    skipped when its artifact already exists on disk, so the service can be
    re-run after a failure and only redoes the missing work.
    """

    def __init__(
        self,
        search_client: IGitHubSearchClient,
        fetcher: IRepositoryFetcher,
        storage: ISearchResultStorage,
        page_count: int = 10,
        page_size: int = 100,
        clone_delay_seconds: float = 1.0
    ):
        """Initialize discovery service.

        Args:
            search_client: GitHub search client implementation
            fetcher: Repository fetcher implementation
            storage: Search result storage implementation
            page_count: Number of search pages to retrieve
            page_size: Number of repositories per search page
            clone_delay_seconds: Fixed pause after each clone
        """
        self._search_client = search_client
        self._fetcher = fetcher
        self._storage = storage
        self._page_count = page_count
        self._page_size = page_size
        self._clone_delay_seconds = clone_delay_seconds

    async def discover(self) -> DiscoveryMetrics:
        """Search every page and clone the repositories it lists.

        Returns:
            DiscoveryMetrics with operation statistics
        """
        start_time = time.time()
        pages_searched = 0
        pages_skipped = 0
        cloned = 0
        skipped = 0

        logger.info(
            f'Searching and cloning the top {self._page_count * self._page_size} '
            f'"eslint-plugin" GitHub repositories to {self._storage.root}'
        )

        for page in range(1, self._page_count + 1):
            logger.info(f"Page {page}")

            if self._storage.has_page(page):
                logger.info(f"Skipping GitHub search for already-retrieved page {page}")
                items = self._storage.load_page(page)
                pages_skipped += 1
            else:
                items = await self._search_client.search_repositories(page, self._page_size)
                self._storage.save_page(page, items)
                pages_searched += 1

            page_cloned, page_skipped = await self._clone_page(page, items)
            cloned += page_cloned
            skipped += page_skipped

        duration = time.time() - start_time
        metrics = DiscoveryMetrics(
            pages_searched=pages_searched,
            pages_skipped=pages_skipped,
            repositories_cloned=cloned,
            repositories_skipped=skipped,
            duration_seconds=duration
        )

        logger.info(
            f"Discovery completed: {cloned} repositories cloned, {skipped} already present, "
            f"in {duration:.2f} seconds"
        )
        return metrics

    async def _clone_page(self, page: int, items: List[Dict[str, Any]]) -> Tuple[int, int]:
        """Clone the repositories of one page that are not on disk yet."""
        cloned = 0
        skipped = 0
        records = [RepositoryRecord.from_api_item(item) for item in items]

        for i, record in enumerate(records, start=1):
            if self._storage.has_clone(page, record.directory_name):
                logger.info(
                    f"Skipped git clone of already-cloned page {page} "
                    f"repository {record.full_name}"
                )
                skipped += 1
                continue

            logger.info(
                f"Cloning repository {i} of {len(records)} in page {page}: {record.full_name}"
            )
            destination = self._storage.clone_path(page, record.directory_name)
            await self._fetcher.fetch(record.clone_url, destination)
            cloned += 1

            # Avoid cloning too fast and overloading GitHub
            await asyncio.sleep(self._clone_delay_seconds)

        return cloned, skipped

    async def close(self) -> None:
        """Close connections."""
        await self._search_client.close()
