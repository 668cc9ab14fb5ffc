"""Entry point for discovering and cloning ESLint plugin repositories.

Searches GitHub for "eslint-plugin" repositories and clones each of them
into the output directory. Safe to re-run: finished pages and clones are skipped.
"""
import asyncio
import logging
import os
import sys
from eslint_plugin_survey.application.discovery_service import DiscoveryService
from eslint_plugin_survey.config import MissingCredentialError, load_environment, load_settings
from eslint_plugin_survey.infrastructure.filesystem_storage import FileSystemSearchResultStorage
from eslint_plugin_survey.infrastructure.git_fetcher import GitCloneFetcher
from eslint_plugin_survey.infrastructure.github_client import GitHubRestSearchClient


logger = logging.getLogger(__name__)


async def main():
    """Execute the discovery operation."""
    try:
        settings = load_settings()
    except (MissingCredentialError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    storage = FileSystemSearchResultStorage(settings.output_root)
    search_client = GitHubRestSearchClient(
        settings.github_token,
        base_url=settings.github_api_url
    )

    discovery = DiscoveryService(
        search_client=search_client,
        fetcher=GitCloneFetcher(),
        storage=storage,
        page_count=settings.page_count,
        page_size=settings.page_size,
        clone_delay_seconds=settings.clone_delay_seconds
    )

    try:
        metrics = await discovery.discover()

        logger.info("=" * 50)
        logger.info("Discovery Metrics:")
        logger.info(f"  Pages searched: {metrics.pages_searched}")
        logger.info(f"  Pages already retrieved: {metrics.pages_skipped}")
        logger.info(f"  Repositories cloned: {metrics.repositories_cloned}")
        logger.info(f"  Repositories already cloned: {metrics.repositories_skipped}")
        logger.info(f"  Duration: {metrics.duration_seconds:.2f} seconds")
        logger.info("=" * 50)

    except Exception as e:
        logger.error(f"Discovery failed: {e}", exc_info=True)
        sys.exit(1)
    finally:
        await discovery.close()


def run():
    load_environment()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    asyncio.run(main())


if __name__ == "__main__":
    run()
