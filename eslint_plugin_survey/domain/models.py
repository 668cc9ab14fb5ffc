"""Domain models representing core survey entities."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List


@dataclass(frozen=True)
class RepositoryRecord:
    """Immutable view of one GitHub search result item.

    Only the three fields consumed downstream are kept. The raw item is what
    gets persisted; this record is rebuilt from it on every read.
    """
    full_name: str
    clone_url: str
    updated_at: datetime

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> 'RepositoryRecord':
        """Build a record from a raw search API item."""
        return cls(
            full_name=item["full_name"],
            clone_url=item["clone_url"],
            updated_at=datetime.fromisoformat(
                item["updated_at"].replace("Z", "+00:00")
            )
        )

    @property
    def directory_name(self) -> str:
        """Returns the clone directory name (owner__repo)."""
        return self.full_name.replace("/", "__", 1)


@dataclass(frozen=True)
class RuleClassification:
    """Independent substring signals found in one rule file."""
    mentions_options: bool
    mentions_schema: bool
    is_function_rule: bool
    is_object_rule: bool

    @property
    def mentions_options_without_schema(self) -> bool:
        return self.mentions_options and not self.mentions_schema


@dataclass
class DatasetCounters:
    """Counters accumulated for one dataset during a single analysis run."""
    title: str
    total_plugins: int = 0
    plugins_with_some_rules: int = 0
    total_rules: int = 0
    rule_mentions_options: int = 0
    rule_mentions_options_but_not_schema: int = 0
    rule_type_function: int = 0
    rule_type_object: int = 0

    def add_plugin(self, rules: List[RuleClassification]) -> None:
        """Count one plugin and every classified rule it contains."""
        self.total_plugins += 1
        self.total_rules += len(rules)
        if rules:
            self.plugins_with_some_rules += 1

        for rule in rules:
            self.rule_mentions_options += int(rule.mentions_options)
            self.rule_mentions_options_but_not_schema += int(
                rule.mentions_options_without_schema
            )
            self.rule_type_function += int(rule.is_function_rule)
            self.rule_type_object += int(rule.is_object_rule)

    @property
    def rule_type_unknown(self) -> int:
        return self.total_rules - self.rule_type_function - self.rule_type_object


@dataclass(frozen=True)
class DiscoveryMetrics:
    """Metrics for a discovery run."""
    pages_searched: int
    pages_skipped: int
    repositories_cloned: int
    repositories_skipped: int
    duration_seconds: float
