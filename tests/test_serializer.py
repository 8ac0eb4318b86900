#!/usr/bin/env python3
"""
Tests for inline and column output.
"""

import io

import pytest

from vncorenlp.exceptions import InvalidConfiguration
from vncorenlp.pipeline import Annotation, Sentence, Word
from vncorenlp.serializer import format_column_row, format_inline_word, serialize, write_annotation


SENTENCE = "Ông Nguyễn đang làm việc."


class TestInline:
    """One line per sentence, form[/POS][/NER]."""

    def test_wseg_pos(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg,pos")
        output = serialize(pipeline.annotate(SENTENCE), "inline")

        print(f"\n{output}")

        assert output == "Ông/Np Nguyễn/Np đang/N làm_việc/V ./CH\n\n"
        lines = [line for line in output.splitlines() if line.strip()]
        assert len(lines) == 1
        assert len(lines[0].split(" ")) == 5

    def test_pos_then_ner(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg,pos,ner")
        output = serialize(pipeline.annotate(SENTENCE), "inline")
        assert output.split(" ")[0] == "Ông/Np/B-PER"

    def test_ner_only_has_no_pos_suffix(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg,ner")
        output = serialize(pipeline.annotate(SENTENCE), "inline")
        assert output.split(" ")[0] == "Ông/B-PER"

    def test_plain_words(self):
        assert format_inline_word(Word(index=1, form="làm_việc")) == "làm_việc"

    def test_sentences_separated_by_blank_line(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg")
        output = serialize(pipeline.annotate("Tôi là sinh viên. Tôi học ở Hà Nội."), "inline")
        assert output == "Tôi là sinh_viên .\n\nTôi học ở Hà_Nội .\n\n"


class TestColumn:
    """One tab-separated row per word."""

    def test_rows_match_words(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg,pos")
        annotation = pipeline.annotate(SENTENCE)
        output = serialize(annotation, "column")
        rows = [line for line in output.split("\n") if line]

        print(f"\n{output}")

        assert len(rows) == annotation.word_count
        indices = [int(row.split("\t")[0]) for row in rows]
        assert indices == list(range(1, len(rows) + 1))

    def test_fixed_column_order(self, make_pipeline):
        pipeline = make_pipeline()
        output = serialize(pipeline.annotate(SENTENCE), "column")
        first = output.split("\n")[0]
        assert first.split("\t") == ["1", "Ông", "Np", "B-PER", "0", "root"]

    def test_absent_fields_empty(self):
        row = format_column_row(Word(index=3, form="đang"))
        assert row.split("\t") == ["3", "đang", "", "", "", ""]

    def test_sentences_separated_by_blank_line(self, make_pipeline):
        pipeline = make_pipeline(annotators="")
        output = serialize(pipeline.annotate("Xin chào. Tạm biệt."), "column")
        assert output == "1\tXin\t\t\t\t\n2\tchào\t\t\t\t\n3\t.\t\t\t\t\n\n1\tTạm\t\t\t\t\n2\tbiệt\t\t\t\t\n3\t.\t\t\t\t\n\n"

    def test_index_restarts_per_sentence(self, make_pipeline):
        pipeline = make_pipeline(annotators="wseg")
        output = serialize(pipeline.annotate("Xin chào. Tạm biệt."), "column")
        blocks = [block for block in output.split("\n\n") if block]
        assert [block.split("\n")[0].split("\t")[0] for block in blocks] == ["1", "1"]


class TestSerializationContract:
    """Format validation and purity."""

    def test_serializing_twice_is_identical(self, make_pipeline):
        annotation = make_pipeline().annotate(SENTENCE)
        before = annotation.model_dump()
        for fmt in ("inline", "column"):
            assert serialize(annotation, fmt) == serialize(annotation, fmt)
        assert annotation.model_dump() == before

    def test_format_case_insensitive(self, make_pipeline):
        annotation = make_pipeline().annotate(SENTENCE)
        assert serialize(annotation, "COLUMN") == serialize(annotation, "column")

    def test_unsupported_format(self):
        annotation = Annotation(raw_text="x")
        annotation.add_sentence(Sentence(text="x", tokens=["x"], words=[Word(index=1, form="x")]))
        stream = io.StringIO()
        with pytest.raises(InvalidConfiguration):
            write_annotation(annotation, stream, "conll")
        assert stream.getvalue() == ""

    def test_write_annotation(self, make_pipeline):
        annotation = make_pipeline(annotators="wseg").annotate(SENTENCE)
        stream = io.StringIO()
        write_annotation(annotation, stream, "inline")
        assert stream.getvalue() == "Ông Nguyễn đang làm_việc .\n\n"

    def test_empty_annotation(self):
        assert serialize(Annotation(raw_text=""), "inline") == ""
