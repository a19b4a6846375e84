"""Tests for the command line entry point."""

import pytest

from api.cli import create_parser, run
from shared.config import CatalogConfig


def test_parser_subcommands():
    parser = create_parser()

    args = parser.parse_args(["import", "products", "--category", "pumps", "--category", "chillers", "--dry-run"])
    assert (args.command, args.family, args.category, args.dry_run) == ("import", "products", ["pumps", "chillers"], True)

    args = parser.parse_args(["reclassify", "--only-missing"])
    assert args.only_missing is True and args.category is None

    args = parser.parse_args(["repair-images", "projects"])
    assert args.family == "projects"


def test_parser_rejects_unknown_category():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["import", "products", "--category", "boilers"])


def test_missing_document_exits_with_fatal_code(tmp_path, capsys):
    config = CatalogConfig(pg_conn="", site_root=str(tmp_path), legacy_root=str(tmp_path), upload_root=str(tmp_path))
    args = create_parser().parse_args(["import", "projects", "--dry-run"])

    assert run(args, config) == 2
    assert "[ERR] document not found" in capsys.readouterr().out


def test_unconfigured_store_exits_with_fatal_code(config, capsys):
    args = create_parser().parse_args(["import", "products", "--category", "pumps"])

    assert run(args, config) == 2
    assert "PG_CONN is not set" in capsys.readouterr().out


def test_dry_run_completes(config, capsys):
    args = create_parser().parse_args(["import", "products", "--category", "pumps", "--dry-run"])

    assert run(args, config) == 0
    out = capsys.readouterr().out
    assert "[dry-run] HVAC Inline Pump [pumps / Fire Fighting]" in out
