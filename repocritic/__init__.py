"""
repocritic - LLM-powered best-practices review for front-end repositories.

This package provides a REST API and CLI that walk a GitHub repository,
send each front-end source file to a generative model for critique, and
cache the aggregated suggestions.
"""

__version__ = "0.1.0"
