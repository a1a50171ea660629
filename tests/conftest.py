"""
Pytest configuration and shared fakes.
"""

from typing import Dict, List

import pytest

from repocritic.analyzer import RepositoryAnalyzer
from repocritic.cache import AnalysisCache
from repocritic.errors import GitHubAPIError
from repocritic.llm import CompletionModel


def file_entry(path: str) -> Dict[str, str]:
    return {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "type": "file",
        "download_url": f"https://raw.example.com/{path}",
    }


def dir_entry(path: str) -> Dict[str, str]:
    return {"name": path.rsplit("/", 1)[-1], "path": path, "type": "dir", "download_url": None}


class FakeGitHub:
    """In-memory stand-in for GitHubClient."""

    def __init__(self, tree: Dict[str, List[Dict]], contents: Dict[str, str] = None):
        self.tree = tree
        self.contents = contents or {}
        self.list_calls: List[str] = []
        self.fetch_calls: List[str] = []

    def list_contents(self, owner, repo, path=""):
        self.list_calls.append(path)
        if path not in self.tree:
            raise GitHubAPIError("Not Found", status_code=404)
        return self.tree[path]

    def fetch_file(self, download_url):
        self.fetch_calls.append(download_url)
        path = download_url.replace("https://raw.example.com/", "")
        if path not in self.contents:
            raise GitHubAPIError("Failed to download file", status_code=404)
        return self.contents[path]


class FakeModel(CompletionModel):
    """Model returning canned responses keyed by a marker in the prompt."""

    def __init__(self, responses: Dict[str, object], default: str = ""):
        super().__init__("fake")
        self.responses = responses
        self.default = default
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        for marker, response in self.responses.items():
            if marker in prompt:
                if isinstance(response, Exception):
                    raise response
                return response
        return self.default


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials out of the tests."""
    for name in ("GEMINI_API_KEY", "GITHUB_TOKEN", "GEMINI_MODEL", "PORT",
                 "REPOCRITIC_CACHE_TTL", "REPOCRITIC_MAX_DEPTH", "REPOCRITIC_MAX_FILES",
                 "REPOCRITIC_HTTP_TIMEOUT", "REPOCRITIC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


REPO_URL = "https://github.com/ownerX/repoY"


def make_github() -> FakeGitHub:
    tree = {
        "": [file_entry("a.ts"), file_entry("b.png"), dir_entry("c")],
        "c": [file_entry("c/d.jsx")],
    }
    contents = {"a.ts": "// file a", "c/d.jsx": "// file d"}
    return FakeGitHub(tree, contents)


def make_analyzer(github=None, model=None, cache=None, **kwargs) -> RepositoryAnalyzer:
    if github is None:
        github = make_github()
    if model is None:
        model = FakeModel({"// file a": "Use strict types\nShared tip", "// file d": "Shared tip\nAdd keys"})
    if cache is None:
        cache = AnalysisCache()
    return RepositoryAnalyzer(github=github, model=model, cache=cache, **kwargs)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
