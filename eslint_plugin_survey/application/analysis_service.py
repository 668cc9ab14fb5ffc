"""Analysis service aggregating rule classifications into datasets."""
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from eslint_plugin_survey.application.rule_classifier import RuleClassifier
from eslint_plugin_survey.domain.models import DatasetCounters, RepositoryRecord
from eslint_plugin_survey.domain.storage_interface import ISearchResultStorage


logger = logging.getLogger(__name__)

RepositoryPredicate = Callable[[RepositoryRecord], bool]


def years_before(moment: datetime, years: int) -> datetime:
    """Shift ``moment`` back by whole calendar years.

    Feb 29 in a year without one rolls over to Mar 1.
    """
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        return moment.replace(year=moment.year - years, month=3, day=1)


def updated_within(years: int, now: Optional[datetime] = None) -> RepositoryPredicate:
    """Predicate accepting repositories updated after ``now`` minus ``years``."""
    threshold = years_before(now or datetime.now(timezone.utc), years)

    def predicate(record: RepositoryRecord) -> bool:
        return record.updated_at > threshold

    return predicate


class AnalysisService:
    """Application service for computing survey datasets.

    Reads the artifacts left by the discovery stage; never touches the network.
    """

    def __init__(
        self,
        storage: ISearchResultStorage,
        classifier: Optional[RuleClassifier] = None,
        page_size: int = 100
    ):
        """Initialize analysis service.

        Args:
            storage: Storage holding search results and cloned repositories
            classifier: Rule classifier (default markers when omitted)
            page_size: Search page size the crawl used, for dataset titles
        """
        self._storage = storage
        self._classifier = classifier or RuleClassifier()
        self._page_size = page_size

    def count_pages_found(self) -> int:
        return self._storage.count_cloned_pages()

    def analyze(
        self,
        title: str,
        page_count: int,
        predicate: Optional[RepositoryPredicate] = None
    ) -> DatasetCounters:
        """Aggregate counters over the first ``page_count`` pages.

        Args:
            title: Dataset title shown in the report
            page_count: Number of pages to include
            predicate: Optional filter on repository records

        Returns:
            A fresh DatasetCounters for this dataset
        """
        counts = DatasetCounters(title=title)

        for page in range(1, page_count + 1):
            records: Dict[str, RepositoryRecord] = {}
            for item in self._storage.load_page(page):
                record = RepositoryRecord.from_api_item(item)
                records.setdefault(record.directory_name, record)

            for directory_name in self._storage.list_cloned(page):
                record = records.get(directory_name)
                if record is None:
                    logger.warning(
                        f"No search result for cloned repository {directory_name} "
                        f"in page {page}; excluding it from '{title}'"
                    )
                    continue
                if predicate is not None and not predicate(record):
                    continue

                rules = self._classifier.classify_repository(
                    self._storage.clone_path(page, directory_name)
                )
                counts.add_plugin(rules)

        logger.info(
            f"Analyzed '{title}': {counts.total_plugins} plugins, {counts.total_rules} rules"
        )
        return counts

    def run_default_datasets(self, now: Optional[datetime] = None) -> List[DatasetCounters]:
        """Compute the four standard datasets over every cloned page."""
        pages_found = self.count_pages_found()
        top = f"Top {pages_found * self._page_size} Plugins"

        return [
            self.analyze(f"Top {self._page_size} Plugins", min(1, pages_found)),
            self.analyze(f"{top}, Updated Last 1 Year", pages_found, updated_within(1, now)),
            self.analyze(f"{top}, Updated Last 2 Years", pages_found, updated_within(2, now)),
            self.analyze(top, pages_found),
        ]
