"""Text report of survey datasets."""
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Sequence, Union
from eslint_plugin_survey.domain.models import DatasetCounters


Cell = Union[str, int, float]
TWO_PLACES = Decimal("0.01")


def ratio(numerator: float, denominator: float) -> float:
    """Divide without guarding against zero: x/0 is inf, 0/0 is nan."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def percentage(numerator: float, denominator: float) -> float:
    return ratio(numerator, denominator) * 100


def round_value(value: float) -> str:
    """Format with two decimals, halves rounded up (1/3 -> '0.33', 9/8 -> '1.13')."""
    if not math.isfinite(value):
        return f"{value:.2f}"
    return str(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def format_table(rows: Sequence[Sequence[Cell]]) -> str:
    """Render rows as a bordered text table, first row as header."""
    text_rows = [[str(cell) for cell in row] for row in rows]
    widths = [max(len(row[i]) for row in text_rows) for i in range(len(text_rows[0]))]
    border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    lines = [border]
    for index, row in enumerate(text_rows):
        lines.append("| " + " | ".join(cell.ljust(width) for cell, width in zip(row, widths)) + " |")
        if index == 0:
            lines.append(border.replace("-", "="))
    lines.append(border)
    return "\n".join(lines)


def _row(label: str, datasets: Sequence[DatasetCounters], value: Callable[[DatasetCounters], Cell]) -> List[Cell]:
    return [label, *(value(dataset) for dataset in datasets)]


def general_table(datasets: Sequence[DatasetCounters]) -> str:
    return format_table([
        _row("Metric", datasets, lambda d: f"Value ({d.title})"),
        _row("Plugins Found", datasets, lambda d: d.total_plugins),
        _row("Plugins With Rules Found", datasets, lambda d: d.plugins_with_some_rules),
        _row(
            "Average Rules Per Plugin", datasets,
            lambda d: round_value(ratio(d.total_rules, d.plugins_with_some_rules))
        ),
    ])


def rule_type_table(datasets: Sequence[DatasetCounters]) -> str:
    return format_table([
        _row("Rule Type", datasets, lambda d: f"% ({d.title})"),
        _row(
            "Object Rule", datasets,
            lambda d: round_value(percentage(d.rule_type_object, d.total_rules))
        ),
        _row(
            "Function Rule", datasets,
            lambda d: round_value(percentage(d.rule_type_function, d.total_rules))
        ),
        _row(
            "Unknown", datasets,
            lambda d: round_value(percentage(d.rule_type_unknown, d.total_rules))
        ),
    ])


def rule_options_table(datasets: Sequence[DatasetCounters]) -> str:
    return format_table([
        _row("Metric", datasets, lambda d: f"% ({d.title})"),
        _row(
            "Rules With Options", datasets,
            lambda d: round_value(percentage(d.rule_mentions_options, d.total_rules))
        ),
        _row(
            "Rules With Options But Missing Schema, Out of Total Rules", datasets,
            lambda d: round_value(
                percentage(d.rule_mentions_options_but_not_schema, d.total_rules)
            )
        ),
        _row(
            "Rules With Options But Missing Schema, Out of Rules With Options", datasets,
            lambda d: round_value(
                percentage(d.rule_mentions_options_but_not_schema, d.rule_mentions_options)
            )
        ),
    ])


def render_report(datasets: Sequence[DatasetCounters]) -> List[str]:
    """Render the general, rule type and rule options tables."""
    return [
        general_table(datasets),
        rule_type_table(datasets),
        rule_options_table(datasets),
    ]
