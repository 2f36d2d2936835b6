from filezer.analysis.frequency import FrequencyRanker
from filezer.analysis.statistics import compute_statistics
from filezer.analysis.tokenizer import tokenize
from filezer.annotation.base import BaseAnnotator
from filezer.annotation.models import AnnotationFailure
from filezer.logging.logger import Log
from filezer.processor.file_loader import FileLoader
from filezer.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from filezer.report.assembler import render_report
from filezer.report.models import AnalysisResult
from filezer.report.writer import ReportWriter


class ReadDocumentStep(PipelineStep):
    state = PipelineState.READING

    def __init__(self, file_loader: FileLoader, encoding: str = "latin-1") -> None:
        self._file_loader = file_loader
        self._encoding = encoding

    def run(self, context: PipelineContext) -> PipelineContext:
        document = self._file_loader.load(context.upload)
        context.document = document
        context.text = document.content.decode(self._encoding, errors="replace")
        Log.info(f"Read {len(document.content)} bytes from {document.filename}")
        return context


class TokenizeStep(PipelineStep):
    state = PipelineState.TOKENIZING

    def run(self, context: PipelineContext) -> PipelineContext:
        context.tokens = tokenize(context.text)
        Log.info(
            f"Tokenized {context.upload.filename}: {len(context.tokens.words)} words, "
            f"{len(context.tokens.sentences)} sentences"
        )
        return context


class ComputeStatisticsStep(PipelineStep):
    state = PipelineState.COMPUTING

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None or context.tokens is None:
            raise ValueError("PipelineContext.document and tokens must be set before statistics")
        if not context.tokens.words or not context.tokens.sentences:
            Log.warning(f"No words or sentences in {context.upload.filename}, averages set to 0")
        context.statistics = compute_statistics(context.document.content, context.tokens)
        return context


class RankWordsStep(PipelineStep):
    state = PipelineState.COMPUTING

    def __init__(self, ranker: FrequencyRanker) -> None:
        self._ranker = ranker

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.tokens is None:
            raise ValueError("PipelineContext.tokens must be set before ranking")
        context.top_words = self._ranker.top_words(context.tokens.words)
        return context


class AnnotateStep(PipelineStep):
    """Entity and category extraction; failures degrade to empty lists."""

    state = PipelineState.ANNOTATING

    def __init__(self, annotator: BaseAnnotator) -> None:
        self._annotator = annotator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.tokens is None:
            raise ValueError("PipelineContext.tokens must be set before annotation")
        text = context.tokens.normalized_text

        entities = self._annotator.extract_entities(text)
        if isinstance(entities, AnnotationFailure):
            context.warnings.append(entities.reason)
            context.entities = ()
        else:
            context.entities = entities.entities

        categories = self._annotator.extract_categories(text)
        if isinstance(categories, AnnotationFailure):
            context.warnings.append(categories.reason)
            context.categories = ()
        else:
            context.categories = categories.categories

        Log.info(
            f"Annotated {context.upload.filename}: {len(context.entities)} entities, "
            f"{len(context.categories)} categories"
        )
        return context

    def close(self) -> None:
        self._annotator.close()


class AssembleResultStep(PipelineStep):
    state = PipelineState.ASSEMBLING

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.statistics is None:
            raise ValueError("PipelineContext.statistics must be set before assembling")
        context.result = AnalysisResult.from_parts(
            context.statistics,
            context.top_words,
            entities=context.entities,
            categories=context.categories,
        )
        context.report_text = render_report(context.result)
        return context


class WriteReportStep(PipelineStep):
    state = PipelineState.ASSEMBLING

    def __init__(self, writer: ReportWriter) -> None:
        self._writer = writer

    def run(self, context: PipelineContext) -> PipelineContext:
        report = self._writer.write(context.report_text)
        context.report = report
        try:
            context.report_bytes = report.read_bytes()
        except Exception:
            report.delete()
            raise
        Log.info(f"Report for {context.upload.filename} ready: {len(context.report_bytes)} bytes")
        return context


class ReportFailureStep(PipelineStep):
    """Runs once when the pipeline fails."""

    state = PipelineState.FAILED

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"Analysis of {context.upload.filename} failed: {context.error_message}")
        return context
