"""Repository fetcher backed by the ``git`` command line."""
import asyncio
import logging
from pathlib import Path
from eslint_plugin_survey.domain.fetcher_interface import IRepositoryFetcher


logger = logging.getLogger(__name__)


class CloneFailedException(Exception):
    """Exception raised when ``git clone`` exits with a non-zero status."""

    def __init__(self, url: str, destination: Path, returncode: int):
        super().__init__(
            f"git clone of {url} into {destination} failed with exit code {returncode}"
        )
        self.url = url
        self.destination = destination
        self.returncode = returncode


class GitCloneFetcher(IRepositoryFetcher):
    """Clones repositories with ``git clone``.

    The child process inherits stdin/stdout/stderr so git's progress output
    is shown live.
    """

    def __init__(self, git_executable: str = "git"):
        self._git = git_executable

    async def fetch(self, url: str, destination: Path) -> None:
        """Clone ``url`` into ``destination``.

        Raises:
            CloneFailedException: When git exits with a non-zero status
        """
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)

        process = await asyncio.create_subprocess_exec(
            self._git, "clone", url, destination.name,
            cwd=str(destination.parent)
        )
        returncode = await process.wait()

        if returncode != 0:
            logger.error(f"git clone failed for {url} (exit code {returncode})")
            raise CloneFailedException(url, destination, returncode)
