"""Builds the issue-analysis prompt sent to the AI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..logging import get_logger
from ..models import KnownFile
from .constants import ANALYSIS_TEMPLATE, MISSING_BODY, RESPONSE_REQUESTS


class PromptBuilder:
    """Renders the four-part analysis request from an issue and its files."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        requests: Sequence[str] = RESPONSE_REQUESTS,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.requests = tuple(requests)
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.logger = get_logger("prompting.builder")

    def build(
        self,
        title: str,
        body: Optional[str] = None,
        known_files: Optional[Sequence[KnownFile]] = None,
    ) -> str:
        files = list(known_files or [])
        template = self._env.get_template(ANALYSIS_TEMPLATE)
        prompt = template.render(
            title=title,
            body=body or MISSING_BODY,
            files=files,
            requests=self.requests,
        )
        self.logger.debug("Built prompt with %d files (%d characters)", len(files), len(prompt))
        return prompt


__all__ = ["PromptBuilder"]
