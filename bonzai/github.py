"""A small GitHub API client for public GitHub and GitHub Enterprise."""

from __future__ import annotations

import json
import os
import urllib.request
from typing import Any

HOST = os.environ.get("GH_HOST") or "github.com"
"""Default host; the GH_HOST environment variable overrides github.com."""

API_VERSION = "v3"
"""Default API version used for enterprise hosts."""


def _get_json(url: str) -> Any:
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    with urllib.request.urlopen(request) as response:
        return json.loads(response.read())


class Client:
    """Queries the GitHub REST API of one host.

    The public host github.com uses https://api.github.com/; any other
    host is treated as GitHub Enterprise at https://<host>/api/<version>/.
    """

    def __init__(self, host: str | None = None, api_version: str | None = None) -> None:
        self.host = host if host is not None else HOST
        self.api_version = api_version if api_version is not None else API_VERSION

    def api(self, suffix: str) -> str:
        """Return the full API URL for suffix."""
        if self.host == "github.com":
            return "https://api.github.com/" + suffix
        return f"https://{self.host}/api/{self.api_version}/{suffix}"

    def repo(self, repo_id: str) -> dict[str, Any]:
        """Return the repository data for an owner/name id."""
        data = _get_json(self.api("repos/" + repo_id))
        if not isinstance(data, dict):
            raise ValueError("unexpected repository data")
        return data

    def latest(self, repo_id: str) -> str:
        """Return the name of the latest release of an owner/name id."""
        data = _get_json(self.api(f"repos/{repo_id}/releases/latest"))
        if not isinstance(data, dict):
            raise ValueError("unexpected release data")
        if "name" in data:
            return data["name"] or ""
        for key, value in data.items():
            if key.lower() == "name":
                return value or ""
        return ""


DEFAULT_CLIENT = Client()


def repo(repo_id: str) -> dict[str, Any]:
    """Return repository data using the default client."""
    return DEFAULT_CLIENT.repo(repo_id)


def latest(repo_id: str) -> str:
    """Return the latest release name using the default client."""
    return DEFAULT_CLIENT.latest(repo_id)