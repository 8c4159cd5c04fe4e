from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from automerge.github import PAGE_SIZE, GitHubClient


class DummyResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None) -> None:
        self.status_code = status_code
        self._json_data = json_data if json_data is not None else {}

    def json(self) -> Any:
        return self._json_data

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class DummySession:
    def __init__(self, responses: Optional[List[DummyResponse]] = None) -> None:
        self._responses = list(responses or [])
        self.requests: List[Dict[str, Any]] = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"method": "get", "url": url, "params": params, "timeout": timeout})
        return self._responses.pop(0)

    def delete(self, url, timeout=None):
        self.requests.append({"method": "delete", "url": url, "timeout": timeout})
        return self._responses.pop(0)


def _client(responses: List[DummyResponse]) -> GitHubClient:
    client = GitHubClient(token="gh_test_token", repo="octo/repo", api_url="https://ghe.example/api/v3/", timeout=5)
    client.session = DummySession(responses)
    return client


def test_headers_include_token() -> None:
    client = GitHubClient(token="gh_test_token", repo="octo/repo")

    assert client.session.headers["Authorization"] == "Bearer gh_test_token"
    assert client.base_url == "https://api.github.com/repos/octo/repo"


def test_get_branch_quotes_ref() -> None:
    client = _client([DummyResponse(json_data={"name": "release/1.0", "protected": True})])

    branch = client.get_branch("release/1.0")

    assert branch["protected"] is True
    assert client.session.requests[0]["url"] == "https://ghe.example/api/v3/repos/octo/repo/branches/release%2F1.0"
    assert client.session.requests[0]["timeout"] == 5


def test_list_check_runs_paginates() -> None:
    first = [{"name": f"job-{i}"} for i in range(PAGE_SIZE)]
    client = _client(
        [
            DummyResponse(json_data={"total_count": PAGE_SIZE + 1, "check_runs": first}),
            DummyResponse(json_data={"total_count": PAGE_SIZE + 1, "check_runs": [{"name": "last"}]}),
        ]
    )

    runs = client.list_check_runs("abc")

    assert len(runs) == PAGE_SIZE + 1
    assert [r["params"]["page"] for r in client.session.requests] == [1, 2]
    assert client.session.requests[0]["url"].endswith("/commits/abc/check-runs")


def test_list_statuses_reads_combined_status() -> None:
    client = _client(
        [DummyResponse(json_data={"state": "pending", "statuses": [{"context": "ci", "state": "pending"}]})]
    )

    assert client.list_statuses("abc") == [{"context": "ci", "state": "pending"}]
    assert client.session.requests[0]["url"].endswith("/commits/abc/status")


def test_get_raises_on_http_error() -> None:
    client = _client([DummyResponse(status_code=500)])

    with pytest.raises(requests.HTTPError):
        client.get_pull_request(1)


def test_remove_label_missing_is_noop() -> None:
    client = _client([DummyResponse(status_code=404)])

    assert client.remove_label(4, "auto merge") is False
    assert client.session.requests[0]["url"].endswith("/issues/4/labels/auto%20merge")


def test_remove_label() -> None:
    client = _client([DummyResponse(status_code=200, json_data=[])])

    assert client.remove_label(4, "automerge") is True


def test_remove_label_raises_on_server_error() -> None:
    client = _client([DummyResponse(status_code=503)])

    with pytest.raises(requests.HTTPError):
        client.remove_label(4, "automerge")


def test_remove_label_sends_single_delete() -> None:
    client = _client([DummyResponse(status_code=200, json_data=[])])

    client.remove_label(4, "automerge")

    assert [r["method"] for r in client.session.requests] == ["delete"]
