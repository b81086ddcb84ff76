"""GitHub REST API client for opening pull requests."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


def normalize_repository(repo_url: str) -> str:
    """Return ``owner/name`` from a slug or a github.com URL."""
    repo = repo_url.strip()
    for prefix in ("https://github.com/", "http://github.com/", "git@github.com:"):
        if repo.startswith(prefix):
            repo = repo[len(prefix):]
    if repo.endswith(".git"):
        repo = repo[:-4]
    return repo.strip("/")


class GitHubClient:
    """Minimal GitHub client. HTTP errors propagate as ``httpx.HTTPStatusError``."""

    def __init__(self, token: str, base_url: str = GITHUB_API_URL) -> None:
        self._token = token
        self._base_url = base_url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=30.0,
        )

    async def get_default_branch(self, repo: str) -> str:
        async with self._client() as client:
            response = await client.get(f"/repos/{normalize_repository(repo)}")
            response.raise_for_status()
            return response.json()["default_branch"]

    async def create_pull_request(
        self, repo: str, head: str, base: str, title: str, body: str
    ) -> dict:
        repo = normalize_repository(repo)
        payload = {"title": title, "body": body, "head": head, "base": base}
        async with self._client() as client:
            response = await client.post(f"/repos/{repo}/pulls", json=payload)
            response.raise_for_status()
            data = response.json()
        logger.info("Opened pull request #%s on %s", data.get("number"), repo)
        return data
