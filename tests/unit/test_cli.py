"""Tests for CLI argument parsing."""

import pytest
from pathlib import Path

from vidgroup.config.cli import (
    CLIArgs,
    args_to_cli_args,
    create_parser,
    parse_arguments,
    validate_directory,
)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self):
        """Creates an ArgumentParser."""
        parser = create_parser()
        assert parser.prog == "vidgroup"

    def test_command_is_required(self):
        """Running without a sub-command is an error."""
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_scan(self):
        args = parse_arguments(["scan", "/videos"])
        assert args.command == "scan"
        assert args.directory == "/videos"
        assert args.debug is False

    def test_thumbs_requires_output(self):
        with pytest.raises(SystemExit):
            parse_arguments(["thumbs", "/videos"])

    def test_thumbs_options(self):
        args = parse_arguments(["thumbs", "/videos", "-o", "/tmp/thumbs", "-j", "4", "--timeout", "10"])
        assert args.output == "/tmp/thumbs"
        assert args.batch_size == 4
        assert args.timeout == 10.0

    def test_move_requires_files(self):
        with pytest.raises(SystemExit):
            parse_arguments(["move"])

    def test_move_defaults(self):
        args = parse_arguments(["move", "a.m4v", "b.m4v"])
        assert args.files == ["a.m4v", "b.m4v"]
        assert args.dry_run is False
        assert args.rule == "stem"

    def test_move_rule_choices(self):
        args = parse_arguments(["move", "a.m4v", "--rule", "grandparent"])
        assert args.rule == "grandparent"
        with pytest.raises(SystemExit):
            parse_arguments(["move", "a.m4v", "--rule", "sideways"])

    def test_select_flags(self):
        args = parse_arguments(["select", "/videos", "--dry-run", "-y", "--ext", "mp4", "--ext", ".MKV"])
        assert args.dry_run is True
        assert args.yes is True
        assert args.ext == ["mp4", ".MKV"]
        assert args.output is None


class TestArgsToCliArgs:
    """Tests for args_to_cli_args function."""

    def test_scan_conversion(self):
        cli_args = args_to_cli_args(parse_arguments(["scan", "/videos", "--debug"]))

        assert isinstance(cli_args, CLIArgs)
        assert cli_args.command == "scan"
        assert cli_args.directory == Path("/videos")
        assert cli_args.debug is True
        assert cli_args.files == []
        assert cli_args.dry_run is False
        assert cli_args.extensions == {".m4v"}

    def test_move_conversion(self):
        cli_args = args_to_cli_args(
            parse_arguments(["move", "/v/a.m4v", "/v/b.m4v", "--dry-run", "--rule", "underscore"])
        )

        assert cli_args.files == [Path("/v/a.m4v"), Path("/v/b.m4v")]
        assert cli_args.dry_run is True
        assert cli_args.rule == "underscore"
        assert cli_args.directory is None

    def test_extensions_are_normalized(self):
        cli_args = args_to_cli_args(parse_arguments(["scan", "/v", "--ext", "MP4", "--ext", ".mkv"]))
        assert cli_args.extensions == {".mp4", ".mkv"}

    def test_batch_size_is_at_least_one(self):
        cli_args = args_to_cli_args(parse_arguments(["thumbs", "/v", "-o", "/t", "-j", "0"]))
        assert cli_args.batch_size == 1

    def test_select_conversion(self):
        cli_args = args_to_cli_args(parse_arguments(["select", "/v", "-y", "-o", "/t"]))
        assert cli_args.assume_yes is True
        assert cli_args.output_dir == Path("/t")


class TestValidateDirectory:
    """Tests for validate_directory function."""

    def test_existing_directory(self, tmp_path):
        assert validate_directory(tmp_path) is True

    def test_missing_directory(self, tmp_path):
        assert validate_directory(tmp_path / "missing") is False

    def test_file_is_not_a_directory(self, tmp_path):
        path = tmp_path / "file.m4v"
        path.touch()
        assert validate_directory(path) is False
