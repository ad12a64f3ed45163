"""Fetching composite actions from a GitHub repository."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from dataclasses import dataclass

from stringer.parser import ActionParseError, parse_composite_action_from_bytes
from stringer.types import CompositeAction

GITHUB_RAW_URL = "https://raw.githubusercontent.com"
DEFAULT_REF = "main"

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when files cannot be fetched from GitHub."""


@dataclass(frozen=True)
class FetchOptions:
    """Which repository, ref and files to fetch."""

    repo: str
    ref: str = DEFAULT_REF
    paths: tuple[str, ...] = ("",)


class GithubFetcher:
    """Downloads raw files from GitHub and parses them as composite actions."""

    def __init__(self, token: str, base_url: str = GITHUB_RAW_URL, timeout: float = 30.0) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_composite_actions_from_repo(self, options: FetchOptions) -> list[CompositeAction]:
        """Return the composite actions among ``options.paths``, skipping failures."""
        if not options.repo:
            raise FetchError("repo is required")
        ref = options.ref or DEFAULT_REF
        actions = []
        for path in options.paths:
            try:
                actions.append(parse_composite_action_from_bytes(self._fetch_file(options.repo, ref, path), path))
            except FetchError as err:
                logger.warning("fetch failed for %s: %s", path, err)
            except ActionParseError as err:
                logger.warning("failed to parse %s: %s", path, err)
        return actions

    def _fetch_file(self, repo: str, ref: str, path: str) -> bytes:
        url = f"{self.base_url}/{repo}/{ref}/{path}"
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                if response.status != 200:
                    raise FetchError(f"github returned {response.status} for {url}")
                return response.read()
        except urllib.error.HTTPError as err:
            raise FetchError(f"github returned {err.code} for {url}") from err
        except (urllib.error.URLError, OSError) as err:
            raise FetchError(f"failed to fetch from github: {err}") from err