"""Classify the rules of cloned ESLint plugins and print summary tables."""
import logging
import os
import sys
from eslint_plugin_survey.application.analysis_service import AnalysisService
from eslint_plugin_survey.application.report import render_report
from eslint_plugin_survey.config import load_environment, load_settings
from eslint_plugin_survey.infrastructure.filesystem_storage import FileSystemSearchResultStorage


logger = logging.getLogger(__name__)


def display_report(settings) -> None:
    """Compute the standard datasets and print the report tables."""
    storage = FileSystemSearchResultStorage(settings.output_root)
    analysis = AnalysisService(storage, page_size=settings.page_size)

    datasets = analysis.run_default_datasets()
    for table in render_report(datasets):
        print(table)


def run():
    load_environment()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = load_settings(require_token=False)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        display_report(settings)
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
