"""GitHub REST search API client implementation."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import aiohttp
from eslint_plugin_survey.domain.github_interface import IGitHubSearchClient


logger = logging.getLogger(__name__)


class GitHubRestSearchClient(IGitHubSearchClient):
    """GitHub repository search client over the REST API.

    Implements the IGitHubSearchClient port. Requests are not retried: any
    transport error or non-2xx status propagates to the caller.
    """

    SEARCH_ENDPOINT = "/search/repositories"
    SEARCH_QUERY = '"eslint-plugin" in:name'
    MAX_PAGE_SIZE = 100  # GitHub max

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.github.com",
        query: str = SEARCH_QUERY
    ):
        """Initialize GitHub client.

        Args:
            access_token: GitHub personal access token
            base_url: API root, overridable for GitHub Enterprise or tests
            query: Search query string
        """
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._query = query
        self._session: Optional[aiohttp.ClientSession] = None
        self._rate_limit_remaining: Optional[int] = None
        self._rate_limit_reset_at: Optional[datetime] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        """Initialize the HTTP session (lazy initialization)."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                headers={
                    "Authorization": f"Bearer {self._access_token}",
                    "Accept": "application/vnd.github+json",
                },
                timeout=aiohttp.ClientTimeout(total=30)
            )
        return self._session

    def _update_rate_limit(self, headers) -> None:
        """Record rate limit info from response headers."""
        remaining = headers.get("X-RateLimit-Remaining")
        reset = headers.get("X-RateLimit-Reset")
        if remaining is not None:
            self._rate_limit_remaining = int(remaining)
        if reset is not None:
            self._rate_limit_reset_at = datetime.fromtimestamp(int(reset), tz=timezone.utc)

        logger.info(
            f"Rate limit remaining: {self._rate_limit_remaining}, "
            f"resets at: {self._rate_limit_reset_at}"
        )

    @property
    def rate_limit_remaining(self) -> Optional[int]:
        return self._rate_limit_remaining

    async def search_repositories(self, page: int, per_page: int) -> List[Dict[str, Any]]:
        """Fetch one page of repositories matching the search query.

        Args:
            page: Page number (1-indexed)
            per_page: Results per page (max 100)

        Returns:
            Raw repository items from the API response

        Raises:
            aiohttp.ClientError: On transport failure or non-2xx status
        """
        session = await self._init_session()
        params = {
            "q": self._query,
            "per_page": min(per_page, self.MAX_PAGE_SIZE),
            "page": page,
        }
        url = f"{self._base_url}{self.SEARCH_ENDPOINT}"

        try:
            async with session.get(url, params=params) as response:
                self._update_rate_limit(response.headers)
                response.raise_for_status()
                data = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"Error searching repositories (page {page}): {e}")
            raise

        items = data.get("items", [])
        logger.info(
            f"Fetched {len(items)} repositories for page {page} "
            f"(total matches: {data.get('total_count')})"
        )
        return items

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
