from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT_SECONDS = 15.0
PAGE_SIZE = 100


class GitHubClient:
    def __init__(
        self,
        token: str,
        repo: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ):
        self.token = token
        self.repo = repo
        self.base_url = f"{api_url.rstrip('/')}/repos/{repo}"
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "automerge-status",
        })
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        r = self.session.get(f"{self.base_url}/{path}", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_pull_request(self, pr_number: int) -> Dict[str, Any]:
        return self._get(f"pulls/{pr_number}")

    def get_branch(self, branch: str) -> Dict[str, Any]:
        """Branch summary including ``protected`` and ``protection.required_status_checks``."""
        return self._get(f"branches/{quote(branch, safe='')}")

    def list_check_runs(self, head_sha: str) -> List[Dict[str, Any]]:
        runs: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = self._get(
                f"commits/{head_sha}/check-runs",
                params={"per_page": PAGE_SIZE, "page": page},
            )
            batch = data.get("check_runs", [])
            runs.extend(batch)
            if len(batch) < PAGE_SIZE:
                return runs
            page += 1

    def list_statuses(self, head_sha: str) -> List[Dict[str, Any]]:
        """Latest status per context from the combined status endpoint."""
        statuses: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = self._get(
                f"commits/{head_sha}/status",
                params={"per_page": PAGE_SIZE, "page": page},
            )
            batch = data.get("statuses", [])
            statuses.extend(batch)
            if len(batch) < PAGE_SIZE:
                return statuses
            page += 1

    def remove_label(self, pr_number: int, label: str) -> bool:
        """Remove ``label``; returns False when it was already absent."""
        url = f"{self.base_url}/issues/{pr_number}/labels/{quote(label, safe='')}"
        r = self.session.delete(url, timeout=self.timeout)
        if r.status_code == 404:
            return False
        r.raise_for_status()
        return True
