"""
Tests for the iplog-analyzer command line.
"""

import pytest

from iplog_analyzer.cli.analyzer import create_parser, main


def base_args(log_file, output_file):
    return [
        "--file-log", str(log_file),
        "--file-output", str(output_file),
        "--time-start", "01.01.2023",
        "--time-end", "03.01.2023",
    ]


class TestCli:
    """Test argument handling and exit status."""

    def test_writes_report(self, sample_log, tmp_path, capsys):
        output = tmp_path / "report.txt"
        assert main(base_args(sample_log, output)) == 0

        assert output.read_text(encoding="utf-8") == "10.0.0.1: 1\n10.0.0.2: 1\n"
        assert "Wrote 2 addresses" in capsys.readouterr().out

    def test_flags_are_order_independent(self, sample_log, tmp_path):
        output = tmp_path / "report.txt"
        argv = [
            "--time-end", "03.01.2023",
            "--file-output", str(output),
            "--time-start", "01.01.2023",
            "--file-log", str(sample_log),
        ]
        assert main(argv) == 0
        assert output.exists()

    @pytest.mark.parametrize("missing", ["--file-log", "--file-output", "--time-start", "--time-end"])
    def test_missing_required_flag_prints_usage(self, sample_log, tmp_path, capsys, missing):
        argv = base_args(sample_log, tmp_path / "report.txt")
        index = argv.index(missing)
        del argv[index:index + 2]

        assert main(argv) == 0
        out = capsys.readouterr().out
        assert "usage:" in out
        assert not (tmp_path / "report.txt").exists()

    @pytest.mark.parametrize("flag", ["--file-log", "--file-output", "--time-start", "--time-end"])
    def test_flag_without_value_prints_usage(self, sample_log, tmp_path, capsys, flag):
        output = tmp_path / "report.txt"
        argv = base_args(sample_log, output)
        index = argv.index(flag)
        del argv[index + 1]

        assert main(argv) == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.out
        assert "error:" not in captured.err
        assert not output.exists()

    def test_unrecognised_arguments_are_ignored(self, sample_log, tmp_path):
        output = tmp_path / "report.txt"
        argv = ["stray"] + base_args(sample_log, output) + ["--verbose", "--file"]

        assert main(argv) == 0
        assert output.read_text(encoding="utf-8") == "10.0.0.1: 1\n10.0.0.2: 1\n"

    def test_no_match_is_reported(self, sample_log, tmp_path, capsys):
        output = tmp_path / "report.txt"
        argv = base_args(sample_log, output) + ["--address-mask", "0.0.0.0"]

        assert main(argv) == 1
        assert "Nothing to write" in capsys.readouterr().out
        assert not output.exists()

    def test_bad_date_is_reported(self, sample_log, tmp_path, capsys):
        argv = base_args(sample_log, tmp_path / "report.txt")
        argv[argv.index("01.01.2023")] = "1/1/2023"

        assert main(argv) == 1
        assert "dd.MM.yyyy" in capsys.readouterr().out

    def test_unreadable_log_is_reported(self, tmp_path, capsys):
        argv = base_args(tmp_path / "missing.log", tmp_path / "report.txt")

        assert main(argv) == 1
        assert "Error reading the log file" in capsys.readouterr().out

    def test_unwritable_report_is_reported(self, sample_log, tmp_path, capsys):
        argv = base_args(sample_log, tmp_path / "no-such-dir" / "report.txt")

        assert main(argv) == 1
        assert "Error writing the report" in capsys.readouterr().out

    def test_invalid_log_level(self, sample_log, tmp_path, capsys):
        argv = base_args(sample_log, tmp_path / "report.txt") + ["--log-level", "LOUD"]

        assert main(argv) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_parser_accepts_optional_filters(self):
        args = create_parser().parse_args(
            ["--address-start", "10.0.0.0", "--address-mask", "255.255.255.0"]
        )
        assert args.address_start == "10.0.0.0"
        assert args.address_mask == "255.255.255.0"
        assert args.file_log is None
