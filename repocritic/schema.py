"""
Result types returned by the analysis pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FileAnalysis:
    path: str
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "suggestions": list(self.suggestions)}


@dataclass
class SkippedFile:
    """A file dropped from the analysis and the reason it failed."""
    path: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "reason": self.reason}


@dataclass
class RepoAnalysis:
    repo_name: str = ""
    overall_suggestions: List[str] = field(default_factory=list)
    file_analyses: List[FileAnalysis] = field(default_factory=list)
    skipped_files: List[SkippedFile] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "RepoAnalysis":
        """Build an error result with empty analysis fields."""
        return cls(error=message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the JSON field names used by the HTTP API."""
        data = {
            "repoName": self.repo_name,
            "overallSuggestions": list(self.overall_suggestions),
            "fileAnalyses": [fa.to_dict() for fa in self.file_analyses],
            "skippedFiles": [sf.to_dict() for sf in self.skipped_files],
        }
        if self.error is not None:
            data["error"] = self.error
        return data
