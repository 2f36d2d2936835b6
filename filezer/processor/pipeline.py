from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from filezer.analysis.statistics import TextStatistics
from filezer.analysis.tokenizer import TokenizedText
from filezer.annotation.models import Entity
from filezer.processor.models import RawDocument, UploadedFile
from filezer.report.models import AnalysisResult
from filezer.report.writer import TransientReport


class PipelineState(Enum):
    IDLE = "idle"
    READING = "reading"
    TOKENIZING = "tokenizing"
    COMPUTING = "computing"
    ANNOTATING = "annotating"
    ASSEMBLING = "assembling"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    state: PipelineState = PipelineState.IDLE
    document: RawDocument | None = None
    text: str = ""
    tokens: TokenizedText | None = None
    statistics: TextStatistics | None = None
    top_words: dict[str, int] = field(default_factory=dict)
    entities: tuple[Entity, ...] = ()
    categories: tuple[str, ...] = ()
    warnings: list[str] = field(default_factory=list)
    result: AnalysisResult | None = None
    report_text: str = ""
    report: TransientReport | None = None
    report_bytes: bytes = b""
    error_message: str = ""


class PipelineStep(ABC):
    state: ClassVar[PipelineState]

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the step."""
