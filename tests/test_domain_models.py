"""Tests for domain models."""
from datetime import datetime, timezone
from eslint_plugin_survey.domain.models import (
    DatasetCounters,
    DiscoveryMetrics,
    RepositoryRecord,
    RuleClassification,
)


def _rule(options=False, schema=False, function=False, obj=False):
    return RuleClassification(
        mentions_options=options,
        mentions_schema=schema,
        is_function_rule=function,
        is_object_rule=obj
    )


def test_repository_record_from_api_item():
    """Test building a record from a raw search item."""
    record = RepositoryRecord.from_api_item({
        "full_name": "eslint/eslint-plugin-markdown",
        "clone_url": "https://github.com/eslint/eslint-plugin-markdown.git",
        "updated_at": "2024-01-01T12:00:00Z",
        "stargazers_count": 400,
    })

    assert record.full_name == "eslint/eslint-plugin-markdown"
    assert record.clone_url == "https://github.com/eslint/eslint-plugin-markdown.git"
    assert record.updated_at == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert record.directory_name == "eslint__eslint-plugin-markdown"


def test_directory_name_keeps_double_underscores_in_repo_name():
    """Only the owner separator is replaced."""
    record = RepositoryRecord(
        full_name="acme/eslint-plugin__legacy",
        clone_url="https://github.com/acme/eslint-plugin__legacy.git",
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
    )

    assert record.directory_name == "acme__eslint-plugin__legacy"


def test_options_without_schema():
    assert _rule(options=True).mentions_options_without_schema
    assert not _rule(options=True, schema=True).mentions_options_without_schema
    assert not _rule(schema=True).mentions_options_without_schema


def test_dataset_counters_add_plugin():
    """Test accumulating rules of several plugins."""
    counts = DatasetCounters(title="Test")

    counts.add_plugin([
        _rule(options=True, obj=True),
        _rule(options=True, schema=True, function=True, obj=True),
        _rule(),
    ])
    counts.add_plugin([])

    assert counts.total_plugins == 2
    assert counts.plugins_with_some_rules == 1
    assert counts.total_rules == 3
    assert counts.rule_mentions_options == 2
    assert counts.rule_mentions_options_but_not_schema == 1
    assert counts.rule_type_function == 1
    assert counts.rule_type_object == 2
    assert counts.rule_type_unknown == 0


def test_dataset_counters_start_at_zero():
    counts = DatasetCounters(title="Empty")

    assert counts.total_plugins == 0
    assert counts.total_rules == 0
    assert counts.title == "Empty"


def test_discovery_metrics():
    """Test creating DiscoveryMetrics."""
    metrics = DiscoveryMetrics(
        pages_searched=10,
        pages_skipped=0,
        repositories_cloned=1000,
        repositories_skipped=0,
        duration_seconds=1800.5
    )

    assert metrics.pages_searched == 10
    assert metrics.repositories_cloned == 1000
    assert metrics.duration_seconds == 1800.5
