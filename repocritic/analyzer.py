"""
Repository analysis orchestration.

Flow per call: cache lookup, credential check, URL validation, tree walk, then
one fetch and critique per source file. A failure before the per-file loop
produces an error result; a failure on a single file skips that file.
"""

import copy
import logging
from typing import List, Optional, Set, Tuple

from .cache import AnalysisCache, normalize_cache_key
from .critique import critique_file
from .errors import InvalidRepoUrlError, ModelNotConfiguredError, RepoCriticError
from .github import GitHubClient
from .llm import CompletionModel
from .schema import FileAnalysis, RepoAnalysis, SkippedFile
from .walker import collect_source_files

logger = logging.getLogger(__name__)


def parse_repo_url(repo_url: str) -> Tuple[str, str]:
    """
    Extract (owner, repo_name) from the last two path segments of a URL.

    Args:
        repo_url: Repository URL, e.g. https://github.com/owner/repo

    Returns:
        Tuple of owner and repository name

    Raises:
        InvalidRepoUrlError: If either segment is missing or empty
    """
    parts = repo_url.strip().split("/")
    if len(parts) < 2:
        raise InvalidRepoUrlError()
    owner, repo_name = parts[-2], parts[-1]
    if not owner or not repo_name:
        raise InvalidRepoUrlError()
    return owner, repo_name


class RepositoryAnalyzer:
    """Runs the end-to-end analysis of a repository URL."""

    def __init__(self, github: GitHubClient, model: Optional[CompletionModel], cache: AnalysisCache,
                 max_depth: Optional[int] = None, max_files: Optional[int] = None):
        self.github = github
        self.model = model
        self.cache = cache
        self.max_depth = max_depth
        self.max_files = max_files

    def analyze(self, repo_url: str) -> RepoAnalysis:
        """
        Analyze a repository, serving repeated URLs from the cache.

        Never raises: configuration, validation and listing failures are
        returned as a RepoAnalysis with only `error` set. Callers receive
        their own copy, so mutating a result leaves the cache untouched.
        """
        try:
            cache_key = self._cache_key(repo_url)
            cached = self.cache.get(cache_key) if cache_key is not None else None
            if cached is not None:
                logger.info(f"Returning cached analysis for: {repo_url}")
                return copy.deepcopy(cached)

            result = self._run(repo_url)
        except RepoCriticError as e:
            logger.warning(f"Analysis of {repo_url} failed: {e}")
            return RepoAnalysis.failure(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error analyzing {repo_url}")
            return RepoAnalysis.failure(str(e) or "Unknown error occurred")

        self.cache.set(cache_key, copy.deepcopy(result))
        return result

    @staticmethod
    def _cache_key(repo_url: str) -> Optional[str]:
        """Cache key for repo_url, or None if it is not a valid repository URL."""
        try:
            parse_repo_url(repo_url)
        except InvalidRepoUrlError:
            return None
        return normalize_cache_key(repo_url)

    def _run(self, repo_url: str) -> RepoAnalysis:
        if self.model is None:
            raise ModelNotConfiguredError()

        owner, repo_name = parse_repo_url(repo_url)
        logger.info(f"Analyzing repository {owner}/{repo_name} with model {self.model.name}")

        files = collect_source_files(
            self.github, owner, repo_name,
            max_depth=self.max_depth, max_files=self.max_files,
        )
        logger.info(f"Found files: {len(files)}")

        file_analyses: List[FileAnalysis] = []
        skipped: List[SkippedFile] = []
        overall: List[str] = []
        seen: Set[str] = set()

        for repo_file in files:
            try:
                content = self.github.fetch_file(repo_file.download_url)
                suggestions = critique_file(content, self.model)
            except Exception as e:
                logger.error(f"Error analyzing file {repo_file.path}: {e}")
                skipped.append(SkippedFile(path=repo_file.path, reason=str(e) or type(e).__name__))
                continue

            file_analyses.append(FileAnalysis(path=repo_file.path, suggestions=suggestions))
            for suggestion in suggestions:
                if suggestion not in seen:
                    seen.add(suggestion)
                    overall.append(suggestion)

        if skipped:
            logger.warning(f"Skipped {len(skipped)} of {len(files)} files in {owner}/{repo_name}")

        return RepoAnalysis(
            repo_name=repo_name,
            overall_suggestions=overall,
            file_analyses=file_analyses,
            skipped_files=skipped,
        )
