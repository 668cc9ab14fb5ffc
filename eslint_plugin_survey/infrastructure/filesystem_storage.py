"""Filesystem implementation of search result and clone storage."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union
from eslint_plugin_survey.domain.storage_interface import ISearchResultStorage


logger = logging.getLogger(__name__)


class FileSystemSearchResultStorage(ISearchResultStorage):
    """Stores crawl artifacts under an output root.

    Layout:
        <root>/github-search-results/<page>.json
        <root>/cloned-repositories/<page>/<owner>__<repo>/

    A page file is written once and trusted forever afterwards.
    """

    SEARCH_RESULTS_DIR = "github-search-results"
    CLONED_REPOSITORIES_DIR = "cloned-repositories"

    def __init__(self, output_root: Union[str, Path]):
        """Initialize storage.

        Args:
            output_root: Directory holding all crawl artifacts
        """
        self._root = Path(output_root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def search_results_dir(self) -> Path:
        return self._root / self.SEARCH_RESULTS_DIR

    @property
    def cloned_repositories_dir(self) -> Path:
        return self._root / self.CLONED_REPOSITORIES_DIR

    def _page_file(self, page: int) -> Path:
        return self.search_results_dir / f"{page}.json"

    def _page_dir(self, page: int) -> Path:
        return self.cloned_repositories_dir / str(page)

    def has_page(self, page: int) -> bool:
        return self._page_file(page).exists()

    def save_page(self, page: int, items: List[Dict[str, Any]]) -> None:
        """Write the raw items of ``page`` as a JSON array."""
        self.search_results_dir.mkdir(parents=True, exist_ok=True)
        path = self._page_file(page)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(items, f)
        logger.info(f"Saved {len(items)} search results to {path}")

    def load_page(self, page: int) -> List[Dict[str, Any]]:
        """Read the raw items of ``page``.

        Raises:
            FileNotFoundError: When the page was never searched
        """
        with open(self._page_file(page), "r", encoding="utf-8") as f:
            return json.load(f)

    def clone_path(self, page: int, directory_name: str) -> Path:
        return self._page_dir(page) / directory_name

    def has_clone(self, page: int, directory_name: str) -> bool:
        return self.clone_path(page, directory_name).exists()

    def list_cloned(self, page: int) -> List[str]:
        page_dir = self._page_dir(page)
        if not page_dir.is_dir():
            return []
        return sorted(entry.name for entry in page_dir.iterdir() if entry.is_dir())

    def count_cloned_pages(self) -> int:
        if not self.cloned_repositories_dir.is_dir():
            return 0
        return sum(1 for entry in self.cloned_repositories_dir.iterdir() if entry.is_dir())
