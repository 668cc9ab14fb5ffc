"""Heuristic classification of ESLint rule source files.

Classification is plain substring search over the file text; nothing is
parsed or executed. The signals are independent booleans, so a rule may look
like both a function rule and an object rule, or like neither.
"""
import logging
from pathlib import Path
from typing import List, Optional
from eslint_plugin_survey.domain.models import RuleClassification
from eslint_plugin_survey.domain.rule_markers import DEFAULT_RULE_MARKERS, RuleMarkers


logger = logging.getLogger(__name__)

# Checked in priority order
RULES_DIRECTORY_CANDIDATES = (
    ("lib", "rules"),
    ("src", "rules"),
    ("rules",),
)
RULE_FILE_SUFFIXES = (".js", ".ts")
IGNORED_RULE_FILE_SUFFIXES = ("-test.js", "-test.ts", ".d.ts", ".test.js", ".test.ts")
IGNORED_RULE_FILE_NAMES = frozenset({
    "index.js",
    "index.ts",
    "util.js",
    "util.ts",
    "utils.js",
    "utils.ts",
})


def find_rules_path(repository_root: Path) -> Optional[Path]:
    """Returns the first conventional rules directory that exists, if any."""
    for parts in RULES_DIRECTORY_CANDIDATES:
        candidate = Path(repository_root).joinpath(*parts)
        if candidate.exists():
            return candidate
    # Plugins that do not keep their rules in a `rules` folder are ignored.
    return None


def is_rule_file_name(name: str) -> bool:
    return (
        name.endswith(RULE_FILE_SUFFIXES)
        and not name.endswith(IGNORED_RULE_FILE_SUFFIXES)
        and name not in IGNORED_RULE_FILE_NAMES
    )


def find_rule_files(rules_path: Path) -> List[str]:
    """Names of the candidate rule files directly inside ``rules_path``."""
    return sorted(
        entry.name
        for entry in Path(rules_path).iterdir()
        if not entry.is_dir() and is_rule_file_name(entry.name)
    )


def classify_rule(contents: str, markers: RuleMarkers = DEFAULT_RULE_MARKERS) -> RuleClassification:
    """Classify one rule from its source text."""
    return RuleClassification(
        mentions_options=markers.options_marker in contents,
        mentions_schema=markers.schema_marker in contents,
        is_function_rule=any(code in contents for code in markers.function_rule_markers),
        is_object_rule=any(code in contents for code in markers.object_rule_markers),
    )


class RuleClassifier:
    """Classifies every rule file of a cloned plugin repository."""

    def __init__(self, markers: RuleMarkers = DEFAULT_RULE_MARKERS):
        self._markers = markers

    def classify_file(self, path: Path) -> RuleClassification:
        contents = Path(path).read_text(encoding="utf-8", errors="replace")
        return classify_rule(contents, self._markers)

    def classify_repository(self, repository_root: Path) -> List[RuleClassification]:
        """Classify all rule files of a repository.

        Returns an empty list when the repository has no rules directory.
        """
        rules_path = find_rules_path(repository_root)
        if rules_path is None:
            logger.debug(f"No rules directory found in {repository_root}")
            return []

        return [
            self.classify_file(rules_path / name)
            for name in find_rule_files(rules_path)
        ]
