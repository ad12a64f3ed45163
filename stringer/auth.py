"""Resolution of the GitHub token used for remote scans."""

from __future__ import annotations

import os

GITHUB_TOKEN_ENV = "GITHUB_TOKEN"


class TokenNotFoundError(LookupError):
    """Raised when no GitHub token is available."""


def resolve_github_token(cli_token: str | None) -> str:
    """Return the token given on the command line, else the one in ``GITHUB_TOKEN``.

    Raises :class:`TokenNotFoundError` when neither is set.
    """
    if cli_token:
        return cli_token
    env_token = os.environ.get(GITHUB_TOKEN_ENV, "")
    if env_token:
        return env_token
    raise TokenNotFoundError("no GitHub token found")