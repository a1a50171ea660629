"""
Minimal GitHub REST client used by the tree walker and the API server.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import GitHubAPIError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubClient:
    """GitHub API client for repository contents and user repositories."""

    def __init__(self, token: Optional[str] = None, base_url: str = GITHUB_API_URL,
                 timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def _get(self, url: str, default_message: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GitHub request failed: {url}: {e}")
            raise GitHubAPIError(f"{default_message}: {e}") from e

        if response.status_code >= 400:
            message = default_message
            try:
                body = response.json()
                if isinstance(body, dict) and body.get("message"):
                    message = body["message"]
            except ValueError:
                pass
            logger.error(f"GitHub API error {response.status_code} for {url}: {message}")
            raise GitHubAPIError(message, status_code=response.status_code)

        return response

    def list_contents(self, owner: str, repo: str, path: str = "") -> List[Dict[str, Any]]:
        """
        List the entries of a repository directory.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Directory path inside the repository ("" for the root)

        Returns:
            List of entries with name, path, type and download_url

        Raises:
            GitHubAPIError: If the request fails
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/contents/{path}"
        response = self._get(url, "Failed to list repository contents", headers=self._headers())
        data = response.json()
        # A file path returns a single object instead of a list
        if isinstance(data, dict):
            return [data]
        return data

    def fetch_file(self, download_url: str) -> str:
        """Download the raw text of a file."""
        response = self._get(download_url, "Failed to download file", headers=self._headers())
        return response.text

    def list_user_repos(self, username: str) -> Any:
        """
        List public repositories for a user.

        Args:
            username: GitHub username

        Returns:
            Upstream JSON payload, unmodified
        """
        url = f"{self.base_url}/users/{username}/repos"
        response = self._get(url, "Failed to fetch repositories", headers=self._headers())
        return response.json()
