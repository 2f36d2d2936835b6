from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filezer.analysis.frequency import FrequencyRanker
from filezer.annotation.base import BaseAnnotator
from filezer.annotation.models import (
    AnnotationFailure,
    CategoryExtraction,
    Entity,
    EntityExtraction,
)
from filezer.processor.exceptions import UnreadableFileError
from filezer.processor.file_loader import FileLoader
from filezer.processor.models import UploadedFile
from filezer.processor.pipeline import PipelineContext, PipelineState, PipelineStep
from filezer.processor.processor import Processor
from filezer.processor.steps import (
    AnnotateStep,
    AssembleResultStep,
    ComputeStatisticsStep,
    RankWordsStep,
    ReadDocumentStep,
    TokenizeStep,
    WriteReportStep,
)
from filezer.report.exceptions import ReportWriteError
from filezer.report.writer import ReportWriter

_ENTITY = Entity(type="Place", identifier="Paris", relevance=0.5, confidence=1.0)


def _make_annotator() -> MagicMock:
    annotator = MagicMock(spec=BaseAnnotator)
    annotator.extract_entities.return_value = EntityExtraction(entities=(_ENTITY,))
    annotator.extract_categories.return_value = CategoryExtraction(categories=("travel",))
    return annotator


def _make_pipeline(
    report_dir: Path,
    annotator: MagicMock | None = None,
    writer: ReportWriter | None = None,
) -> tuple[Processor, MagicMock, MagicMock]:
    annotator = annotator or _make_annotator()
    failed_step = MagicMock()
    steps = [
        ReadDocumentStep(FileLoader()),
        TokenizeStep(),
        ComputeStatisticsStep(),
        RankWordsStep(FrequencyRanker()),
        AnnotateStep(annotator),
        AssembleResultStep(),
        WriteReportStep(writer or ReportWriter(report_dir=report_dir)),
    ]
    return Processor(steps=steps, failed_step=failed_step), annotator, failed_step


def _upload(content: bytes | None = b"Hello, world! This is a test.") -> UploadedFile:
    return UploadedFile(filename="notes.txt", media_type="text/plain", content=content)


class TestProcessorPipeline:
    def test_runs_all_steps(self, tmp_path: Path) -> None:
        processor, annotator, failed_step = _make_pipeline(tmp_path)

        output = processor.process(_upload())

        result = output.result
        assert result.total_characters == 29
        assert result.total_words == 6
        assert result.total_lines == 1
        assert result.total_sentences == 2
        assert result.average_word_length == pytest.approx(3.5)
        assert result.average_sentence_length == pytest.approx(3.0)
        assert list(result.top_words) == ["hello", "world", "this", "is", "a", "test"]
        assert result.entities == (_ENTITY,)
        assert result.categories == ("travel",)
        annotator.extract_entities.assert_called_once_with("hello world this is a test")
        annotator.extract_categories.assert_called_once_with("hello world this is a test")
        failed_step.run.assert_not_called()

    def test_report_bytes_match_transient_file(self, tmp_path: Path) -> None:
        processor, _annotator, _failed = _make_pipeline(tmp_path)

        output = processor.process(_upload())

        assert output.report.path.read_bytes() == output.report_bytes
        assert output.report_bytes.startswith(b"File Analysis Report\n\nTotal Characters: 29\n")
        assert b"Paris (Type: Place, Relevance: 0.5, Confidence: 1)" in output.report_bytes

    def test_cleanup_deletes_transient_report(self, tmp_path: Path) -> None:
        processor, _annotator, _failed = _make_pipeline(tmp_path)

        output = processor.process(_upload())
        output.cleanup()

        assert not output.report.path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_empty_input_completes_with_zero_averages(self, tmp_path: Path) -> None:
        processor, _annotator, failed_step = _make_pipeline(tmp_path)

        output = processor.process(_upload(b""))

        assert output.result.total_words == 0
        assert output.result.average_word_length == 0.0
        assert output.result.average_sentence_length == 0.0
        assert output.result.top_words == {}
        failed_step.run.assert_not_called()


class TestAnnotationFailures:
    def test_entity_failure_keeps_categories(self, tmp_path: Path) -> None:
        annotator = _make_annotator()
        annotator.extract_entities.return_value = AnnotationFailure(
            extractor="entities", reason="Error performing entity recognition: down"
        )
        processor, _annotator, failed_step = _make_pipeline(tmp_path, annotator=annotator)

        output = processor.process(_upload())

        assert output.result.entities == ()
        assert output.result.categories == ("travel",)
        assert output.warnings == ("Error performing entity recognition: down",)
        failed_step.run.assert_not_called()

    def test_category_failure_keeps_entities(self, tmp_path: Path) -> None:
        annotator = _make_annotator()
        annotator.extract_categories.return_value = AnnotationFailure(
            extractor="categories", reason="quota"
        )
        processor, _annotator, _failed = _make_pipeline(tmp_path, annotator=annotator)

        output = processor.process(_upload())

        assert output.result.entities == (_ENTITY,)
        assert output.result.categories == ()
        assert b"Categories:\n" in output.report_bytes


class TestProcessorFailures:
    def test_unreadable_file_fails_before_tokenizing(self, tmp_path: Path) -> None:
        processor, annotator, failed_step = _make_pipeline(tmp_path)

        with pytest.raises(UnreadableFileError):
            processor.process(_upload(content=None))

        context: PipelineContext = failed_step.run.call_args.args[0]
        assert context.state is PipelineState.FAILED
        assert context.tokens is None
        assert "Failed to read file content" in context.error_message
        annotator.extract_entities.assert_not_called()

    def test_report_write_error_fails_pipeline(self, tmp_path: Path) -> None:
        writer = MagicMock(spec=ReportWriter)
        writer.write.side_effect = ReportWriteError("disk full")
        processor, _annotator, failed_step = _make_pipeline(tmp_path, writer=writer)

        with pytest.raises(ReportWriteError, match="disk full"):
            processor.process(_upload())

        context: PipelineContext = failed_step.run.call_args.args[0]
        assert context.state is PipelineState.FAILED
        assert context.result is not None
        assert context.error_message == "disk full"

    def test_context_state_follows_current_step(self) -> None:
        seen: list[PipelineState] = []

        class RecordStateStep(PipelineStep):
            state = PipelineState.ANNOTATING

            def run(self, context: PipelineContext) -> PipelineContext:
                seen.append(context.state)
                return context

        processor = Processor(steps=[RecordStateStep()], failed_step=MagicMock())

        with pytest.raises(RuntimeError, match="without a result"):
            processor.process(_upload())

        assert seen == [PipelineState.ANNOTATING]


class TestProcessorClose:
    def test_close_releases_annotator(self, tmp_path: Path) -> None:
        processor, annotator, _ = _make_pipeline(tmp_path)

        processor.close()

        annotator.close.assert_called_once_with()

    def test_close_reaches_every_step(self) -> None:
        steps = [MagicMock(spec=PipelineStep), MagicMock(spec=PipelineStep)]
        processor = Processor(steps=steps, failed_step=MagicMock())

        processor.close()

        for step in steps:
            step.close.assert_called_once_with()
