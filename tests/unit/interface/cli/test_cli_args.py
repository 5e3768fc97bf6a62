from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI options to configuration overrides.
2. Omission of options that were not given.
3. View and diagnostic flags.
"""

from archive_listing.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_target_mapping():
    args = parse_args(["deb.example.net", "--region", "eu-west-1", "--recent-days", "3", "--timeout", "5"])

    overrides = args_to_overrides(args)

    assert overrides == {
        "bucket": "deb.example.net",
        "region": "eu-west-1",
        "recent_days": 3,
        "request_timeout": 5.0,
    }


def test_cli_no_arguments_yields_no_overrides():
    assert args_to_overrides(parse_args([])) == {}


def test_cli_view_flags():
    args = parse_args(["bucket", "-s", "image", "--recent", "--expand-all", "--no-tree", "--json"])

    assert args.query == "image"
    assert args.recent is True
    assert args.expand_all is True
    assert args.no_tree is True
    assert args.json_output is True


def test_cli_diagnostic_flags():
    args = parse_args(["--debug", "--log-file", "/tmp/listing.log", "--use-defaults", "--dump-config"])

    assert args.debug is True
    assert args.log_file == "/tmp/listing.log"
    assert args.use_defaults is True
    assert args.dump_config is True
    assert args.bucket is None
