"""FastAPI application entrypoint for issuelens service mode."""

from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..analyzers import CodeSmellScanner, IssueEnhancer
from ..config import IssueLensConfig, LabelConfig
from ..diagnostics import CollectingDiagnostics
from ..extractors import ReferenceExtractor
from ..logging import get_logger
from ..models import KnownFile
from ..prompting import PromptBuilder
from ..structuring import ResponseStructurer


class KnownFilePayload(BaseModel):
    path: str
    content: str = ""

    def to_known_file(self) -> KnownFile:
        return KnownFile(path=self.path, content=self.content)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReferencesRequest(BaseModel):
    text: Optional[str] = None


class FileReferenceModel(CamelModel):
    path: str
    line_numbers: List[int] = []


class ReferencesResponse(CamelModel):
    references: List[FileReferenceModel]
    diagnostics: List[str] = []


class StructureRequest(BaseModel):
    raw_text: Optional[str] = None
    known_files: List[KnownFilePayload] = []


class CodeSnippetModel(CamelModel):
    file_path: str
    original_code: str
    suggested_code: str
    line_numbers: List[int] = []


class StructureResponse(CamelModel):
    analysis: str
    solution: str
    best_practices: List[str]
    code_snippets: List[CodeSnippetModel]
    diagnostics: List[str] = []


class ScanRequest(BaseModel):
    code: Optional[str] = None


class CodeIssueModel(CamelModel):
    type: str
    description: str
    severity: str


class ScanResponse(CamelModel):
    issues: List[CodeIssueModel]


class EnhanceRequest(BaseModel):
    body: Optional[str] = None
    known_files: List[KnownFilePayload] = []


class FileFindingsModel(CamelModel):
    file_path: str
    issues: List[CodeIssueModel]


class EnhanceResponse(CamelModel):
    file_references: List[FileReferenceModel]
    code_analysis: List[FileFindingsModel]
    diagnostics: List[str] = []


class PromptRequest(BaseModel):
    title: str
    body: Optional[str] = None
    known_files: List[KnownFilePayload] = []


class PromptResponse(BaseModel):
    prompt: str


class HealthResponse(BaseModel):
    status: str


def _messages(diagnostics: CollectingDiagnostics) -> List[str]:
    return [f"{record.stage}: {record.message}" for record in diagnostics.records]


def create_app(config: IssueLensConfig | None = None) -> FastAPI:
    """Create the FastAPI application exposing issuelens operations."""
    labels = (config.labels if config is not None else LabelConfig()).to_section_labels()
    logger = get_logger("service")
    app = FastAPI(title="IssueLens Service", version="1.0.0")

    # Plain ``def`` endpoints: FastAPI runs them in its threadpool, and each
    # request builds its own components so no state is shared.

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/references", response_model=ReferencesResponse)
    def references(payload: ReferencesRequest) -> ReferencesResponse:
        diagnostics = CollectingDiagnostics()
        found = ReferenceExtractor(diagnostics=diagnostics).extract(payload.text)
        logger.info("Extracted %d file references", len(found))
        return ReferencesResponse.model_validate(
            {
                "references": [reference.to_dict() for reference in found],
                "diagnostics": _messages(diagnostics),
            }
        )

    @app.post("/structure", response_model=StructureResponse)
    def structure(payload: StructureRequest) -> StructureResponse:
        diagnostics = CollectingDiagnostics()
        structurer = ResponseStructurer(labels=labels, diagnostics=diagnostics)
        solution = structurer.structure(
            payload.raw_text, [item.to_known_file() for item in payload.known_files]
        )
        logger.info("Structured response with %d code snippets", len(solution.code_snippets))
        data = solution.to_dict()
        data["diagnostics"] = _messages(diagnostics)
        return StructureResponse.model_validate(data)

    @app.post("/scan", response_model=ScanResponse)
    def scan(payload: ScanRequest) -> ScanResponse:
        issues = CodeSmellScanner().scan(payload.code)
        return ScanResponse.model_validate({"issues": [issue.to_dict() for issue in issues]})

    @app.post("/enhance", response_model=EnhanceResponse)
    def enhance(payload: EnhanceRequest) -> EnhanceResponse:
        diagnostics = CollectingDiagnostics()
        analysis = IssueEnhancer(diagnostics=diagnostics).enhance(
            payload.body, [item.to_known_file() for item in payload.known_files]
        )
        data = analysis.to_dict()
        data["diagnostics"] = _messages(diagnostics)
        return EnhanceResponse.model_validate(data)

    @app.post("/prompt", response_model=PromptResponse)
    def prompt(payload: PromptRequest) -> PromptResponse:
        text = PromptBuilder().build(
            payload.title,
            payload.body,
            [item.to_known_file() for item in payload.known_files],
        )
        return PromptResponse(prompt=text)

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, config: IssueLensConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(config), host=host, port=port)
