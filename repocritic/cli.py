"""
Click CLI for repocritic.
"""

import json
import sys
from typing import Optional

import click

from .analyzer import RepositoryAnalyzer
from .cache import AnalysisCache
from .config import load_settings, setup_logging
from .github import GitHubClient
from .llm import get_model


@click.group()
@click.option("--log-level", default=None, help="Log level (overrides REPOCRITIC_LOG_LEVEL)")
@click.pass_context
def main(ctx, log_level: Optional[str]):
    """
    repocritic - LLM best-practices review for front-end repositories.
    """
    ctx.ensure_object(dict)
    settings = load_settings()
    if log_level:
        settings.log_level = log_level.upper()
    setup_logging(settings.log_level)
    ctx.obj["settings"] = settings


@main.command()
@click.option("--host", default="0.0.0.0", help="Bind address")
@click.option("--port", type=int, default=None, help="Port (defaults to PORT or 5000)")
@click.pass_context
def serve(ctx, host: str, port: Optional[int]):
    """
    Run the HTTP API server.
    """
    from .api.app import run

    run(ctx.obj["settings"], host=host, port=port)


@main.command()
@click.argument("repo_url")
@click.option("--json", "output_json", is_flag=True, help="Output machine-readable JSON")
@click.pass_context
def analyze(ctx, repo_url: str, output_json: bool):
    """
    Analyze a repository once and print the suggestions.
    """
    settings = ctx.obj["settings"]
    analyzer = RepositoryAnalyzer(
        github=GitHubClient(token=settings.github_token, timeout=settings.http_timeout),
        model=get_model(settings),
        cache=AnalysisCache(default_ttl=settings.cache_ttl),
        max_depth=settings.max_depth,
        max_files=settings.max_files,
    )
    analysis = analyzer.analyze(repo_url)

    if output_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2))
    elif not analysis.error:
        click.echo(f"Repository: {analysis.repo_name}")
        click.echo(f"Files analyzed: {len(analysis.file_analyses)}")
        for file_analysis in analysis.file_analyses:
            click.echo("")
            click.echo(file_analysis.path)
            for suggestion in file_analysis.suggestions:
                click.echo(f"  {suggestion}")
        if analysis.skipped_files:
            click.echo("")
            click.echo("Skipped:")
            for skipped in analysis.skipped_files:
                click.echo(f"- {skipped.path}: {skipped.reason}")

    if analysis.error:
        click.echo(f"Error: {analysis.error}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
