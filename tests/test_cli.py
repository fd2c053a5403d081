"""
Tests for the command line entry point
"""

import logging

import pytest

from distwiz.cli import build_parser, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


class TestParser:
    def test_defaults_left_to_config(self):
        args = build_parser().parse_args(["-i", "in.txt", "-o", "out.gz"])
        assert args.compress_level is None
        assert args.mode is None
        assert args.threshold is None

    def test_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-i", "a", "-o", "b", "--mode", "turbo"])


class TestMain:
    def test_success(self, write_input, read_matrix, tmp_path):
        out = tmp_path / "matrix.tsv.gz"
        code = main(["--input", str(write_input("A B 0.5\nB C 0.2\n")),
                     "--output", str(out), "--compress-level", "9", "--mode", "disk"])
        assert code == 0
        assert read_matrix(out)[:2] == ["A\tB\tC", "0.0\t0.5\t1.0"]

    def test_missing_paths(self, tmp_path):
        assert main(["--output", str(tmp_path / "out.gz")]) == 1
        assert not (tmp_path / "out.gz").exists()

    def test_bad_level(self, write_input, tmp_path):
        out = tmp_path / "out.gz"
        assert main(["-i", str(write_input("A B 1\n")), "-o", str(out), "-l", "11"]) == 1
        assert not out.exists()

    def test_malformed_input(self, write_input, tmp_path):
        out = tmp_path / "out.gz"
        assert main(["-i", str(write_input("A B\n")), "-o", str(out), "--mode", "mem"]) == 1

    def test_missing_input(self, tmp_path):
        assert main(["-i", str(tmp_path / "nope.txt"), "-o", str(tmp_path / "out.gz")]) == 1

    def test_config_file(self, write_input, tmp_path):
        input_path = write_input("A B 0.5\n")
        out = tmp_path / "out.gz"
        config = tmp_path / "config.yaml"
        config.write_text(f"distwiz:\n  input: {input_path}\n  output: {out}\n  threshold: 1\n")
        assert main(["--config", str(config)]) == 0
        assert out.exists()

    def test_log_file(self, write_input, tmp_path):
        log_file = tmp_path / "run.log"
        code = main(["-i", str(write_input("A B 0.5\n")), "-o", str(tmp_path / "out.gz"),
                     "--log-file", str(log_file)])
        assert code == 0
        assert "CONVERSION SUMMARY" in log_file.read_text()
