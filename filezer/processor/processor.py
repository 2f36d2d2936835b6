from pathlib import Path

from filezer.analysis.frequency import FrequencyRanker
from filezer.annotation.factory import AnnotatorFactory
from filezer.config.settings import Settings
from filezer.logging.logger import Log
from filezer.processor.file_loader import FileLoader
from filezer.processor.models import PipelineOutput, UploadedFile
from filezer.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from filezer.processor.steps import (
    AnnotateStep,
    AssembleResultStep,
    ComputeStatisticsStep,
    RankWordsStep,
    ReadDocumentStep,
    ReportFailureStep,
    TokenizeStep,
    WriteReportStep,
)
from filezer.report.writer import ReportWriter


class Processor:
    """Orchestrates the text analysis pipeline.

    Pipeline: read -> tokenize -> compute -> annotate -> assemble.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, upload: UploadedFile) -> PipelineOutput:
        """Run every step for an accepted upload.

        On failure the context is handed to the failed step and the
        exception is re-raised.
        """
        Log.info(f"Processing {upload.filename}")
        context = PipelineContext(upload=upload)
        try:
            for step in self._steps:
                context.state = step.state
                context = step.run(context)
        except Exception as exc:
            Log.debug(f"Pipeline for {upload.filename} stopped in state {context.state.value}")
            context.state = PipelineState.FAILED
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise

        if context.result is None or context.report is None:
            raise RuntimeError("Pipeline finished without a result and report")
        context.state = PipelineState.DONE
        Log.info(f"Processing of {upload.filename} done")
        return PipelineOutput(
            result=context.result,
            report_bytes=context.report_bytes,
            report=context.report,
            warnings=tuple(context.warnings),
        )

    def close(self) -> None:
        for step in self._steps:
            step.close()


def build_steps(settings: Settings) -> list[PipelineStep]:
    report_dir = Path(settings.report_dir) if settings.report_dir else None
    return [
        ReadDocumentStep(FileLoader(), encoding=settings.text_encoding),
        TokenizeStep(),
        ComputeStatisticsStep(),
        RankWordsStep(FrequencyRanker(limit=settings.top_words_limit)),
        AnnotateStep(AnnotatorFactory.create(settings)),
        AssembleResultStep(),
        WriteReportStep(ReportWriter(report_dir=report_dir)),
    ]


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(steps=build_steps(settings), failed_step=ReportFailureStep())
