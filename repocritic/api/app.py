"""Main FastAPI application for the repocritic REST API."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..analyzer import RepositoryAnalyzer
from ..cache import AnalysisCache
from ..config import Settings, load_settings
from ..errors import GitHubAPIError
from ..github import GitHubClient
from ..llm import get_model

logger = logging.getLogger(__name__)


# Pydantic models
class AnalyzeRequest(BaseModel):
    repoUrl: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: Optional[Settings] = None,
               analyzer: Optional[RepositoryAnalyzer] = None,
               github: Optional[GitHubClient] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The cache is created here and lives as long as the app. Pass
    `analyzer` or `github` to substitute collaborators in tests.
    """
    if settings is None:
        settings = load_settings()

    if github is None:
        github = GitHubClient(token=settings.github_token, timeout=settings.http_timeout)

    if analyzer is None:
        analyzer = RepositoryAnalyzer(
            github=github,
            model=get_model(settings),
            cache=AnalysisCache(default_ttl=settings.cache_ttl),
            max_depth=settings.max_depth,
            max_files=settings.max_files,
        )

    app = FastAPI(
        title="repocritic API",
        description="LLM-powered best-practices review for front-end repositories",
        version=__version__
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.analyzer = analyzer
    app.state.github = github

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies with the standard error envelope."""
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        if request.url.path == "/api/analyze":
            return _error(400, "Repository URL is required")
        return _error(400, "Invalid request")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now().isoformat()}

    @app.get("/api/repos/{username}")
    def list_repos(username: str):
        """Proxy a user's repository list from GitHub."""
        try:
            return github.list_user_repos(username)
        except GitHubAPIError as e:
            logger.error(f"Error fetching repositories: {e}")
            return _error(e.status_code, e.message or "Failed to fetch repositories")
        except Exception as e:
            logger.error(f"Error fetching repositories: {e}")
            return _error(500, "Failed to fetch repositories")

    @app.post("/api/analyze")
    def analyze(request: Optional[AnalyzeRequest] = None):
        """Analyze a repository and return per-file suggestions."""
        if request is None or not request.repoUrl:
            return _error(400, "Repository URL is required")

        try:
            analysis = analyzer.analyze(request.repoUrl)
        except Exception as e:
            logger.error(f"Error analyzing repository: {e}")
            return _error(500, "Failed to analyze repository")

        if analysis.error:
            return _error(400, analysis.error)
        return analysis.to_dict()

    return app


def run(settings: Optional[Settings] = None, host: str = "0.0.0.0", port: Optional[int] = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    if settings is None:
        settings = load_settings()
    app = create_app(settings)
    uvicorn.run(app, host=host, port=port or settings.port)


if __name__ == "__main__":
    run()
