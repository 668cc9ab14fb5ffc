"""Substring markers used to classify ESLint rule source files.

Markers are plain data so new export styles can be recognised by adding
entries, without changing the classification code.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Tuple


@dataclass(frozen=True)
class RuleMarkers:
    """Ordered marker sets for each classification signal."""
    options_marker: str
    schema_marker: str
    function_rule_markers: Tuple[str, ...]
    object_rule_markers: Tuple[str, ...]

    def extended(
        self,
        function_rule_markers: Iterable[str] = (),
        object_rule_markers: Iterable[str] = ()
    ) -> 'RuleMarkers':
        """Returns a copy with extra markers appended to each category."""
        return replace(
            self,
            function_rule_markers=self.function_rule_markers + tuple(function_rule_markers),
            object_rule_markers=self.object_rule_markers + tuple(object_rule_markers)
        )


DEFAULT_RULE_MARKERS = RuleMarkers(
    options_marker="context.options",
    schema_marker="schema",
    function_rule_markers=(
        "export default (context) =>",
        "export default context =>",
        "export default function",
        "module.exports = (context) =>",
        "module.exports = (context,",
        "module.exports = context =>",
        "module.exports = function",
    ),
    object_rule_markers=(
        "const rule: Rule = {",
        "createRule",  # TypeScript helper
        "export = {",
        "export default createRule",
        "export default util.createRule",
        "export default {",
        "export {",
        "meta: {",
        "module.exports = buildRule",
        "module.exports = createValidPropRule",
        "module.exports = define(",
        "module.exports = dependencyRule",
        # eslint-plugin-no-jquery
        "module.exports = utils.createCollectionMethodRule",
        "module.exports = utils.createCollectionOrUtilMethodRule",
        "module.exports = utils.createUtilMethodRule",
        "module.exports = utils.createUtilPropertyRule",
        # eslint-plugin-mpx
        "module.exports = wrapCoreRule",
        "module.exports = {",
        "module.exports.create =",
        "module.exports.meta = {",
    ),
)
