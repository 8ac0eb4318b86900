#!/usr/bin/env python3
"""
Tests for the command line entry point.

Only the wseg annotator is used, which runs on the bundled lexicon and the
blank spaCy tokenizer, so no trained model is needed.
"""

import pytest

from vncorenlp.cli import build_parser, main


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "sample_input.txt"
    path.write_text("Ông Nguyễn đang làm việc.\n\nTôi học ở Hà Nội.\n", encoding="utf-8")
    return path


class TestUsage:
    """Usage and argument errors."""

    def test_no_arguments_prints_usage(self, capsys):
        assert main([]) == 0
        assert "--fin" in capsys.readouterr().out

    def test_help(self, capsys):
        assert main(["-h"]) == 0
        out = capsys.readouterr().out
        assert "--annotators" in out
        assert "With directory:" in out

    def test_missing_input(self, capsys):
        assert main(["-f", "column"]) == 1
        assert "Missing input!" in capsys.readouterr().out

    def test_many_inputs(self, input_file, tmp_path, capsys):
        assert main(["--fin", str(input_file), "--din", str(tmp_path)]) == 1
        assert "Many inputs!" in capsys.readouterr().out

    def test_unknown_annotator(self, input_file, capsys):
        assert main(["-a", "wseg,foo", "--fin", str(input_file)]) == 1
        assert 'Annotator "foo" is invalid.' in capsys.readouterr().out
        assert not input_file.with_name(input_file.name + ".out").exists()

    def test_invalid_format(self, input_file, capsys):
        assert main(["-f", "xml", "--fin", str(input_file)]) == 1
        assert 'Format "xml" is invalid.' in capsys.readouterr().out

    def test_unknown_option_exits_1(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--bogus"])
        assert excinfo.value.code == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_defaults(self):
        args = build_parser().parse_args(["--fin", "x.txt"])
        assert args.format == "inline"
        assert args.annotators == "wseg,pos,ner,parse"


class TestRuns:
    """End-to-end runs with the word segmentation stage."""

    def test_file_mode(self, input_file, tmp_path):
        fout = tmp_path / "output.txt"
        assert main(["-a", "wseg", "--fin", str(input_file), "--fout", str(fout)]) == 0
        assert fout.read_text(encoding="utf-8") == "Ông Nguyễn đang làm_việc .\n\nTôi học ở Hà_Nội .\n\n"

    def test_file_mode_default_output(self, input_file):
        assert main(["-a", "wseg", "--fin", str(input_file)]) == 0
        assert input_file.with_name("sample_input.txt.out").exists()

    def test_column_format(self, input_file, tmp_path):
        fout = tmp_path / "output.txt"
        assert main(["-a", "wseg", "-f", "COLUMN", "--fin", str(input_file), "--fout", str(fout)]) == 0
        first = fout.read_text(encoding="utf-8").split("\n")[0]
        assert first == "1\tÔng\t\t\t\t"

    def test_directory_mode(self, tmp_path):
        din = tmp_path / "in"
        (din / "sub").mkdir(parents=True)
        (din / "a.txt").write_text("Xin chào.\n", encoding="utf-8")
        (din / "sub" / "b.txt").write_text("Tạm biệt.\n", encoding="utf-8")
        (din / ".DS_Store").write_bytes(b"\x00\x01")
        dout = tmp_path / "out"

        assert main(["-a", "wseg", "--din", str(din), "--dout", str(dout)]) == 0
        assert (dout / "a.txt.out").exists()
        assert (dout / "sub" / "b.txt.out").exists()
        assert not (dout / ".DS_Store.out").exists()

    def test_missing_input_file(self, tmp_path):
        assert main(["-a", "wseg", "--fin", str(tmp_path / "missing.txt")]) == 1

    def test_directory_failure_exits_1(self, tmp_path):
        din = tmp_path / "in"
        din.mkdir()
        (din / "bad.txt").write_bytes(b"\xff\xfe\n")

        assert main(["-a", "wseg", "--din", str(din)]) == 1
