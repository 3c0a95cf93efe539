"""CLI behaviour tests."""

from __future__ import annotations

import pytest

from badgeup.cli import _build_parser, main
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_defaults_to_current_directory() -> None:
    args = _build_parser().parse_args([])
    assert args.path == "."
    assert args.verbose is False
    assert args.dry_run is False
    assert args.log_file is None


def test_cli_accepts_path_and_flags() -> None:
    args = _build_parser().parse_args(["crate", "--dry-run", "-v"])
    assert args.path == "crate"
    assert args.dry_run is True
    assert args.verbose is True


def test_main_succeeds_silently(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    project.manifest(name="foo")
    project.write_raw("README.md", "# Title\n")

    main([str(project.path())])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert "crates.io/crates/foo" in project.read("README.md")


def test_main_dry_run_prints_diff(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    project.manifest(name="foo")
    project.write_raw("README.md", "# Title\n")

    main([str(project.path()), "--dry-run"])

    assert "+[![Crates.io]" in capsys.readouterr().out
    assert project.read("README.md") == "# Title\n"


def test_main_reports_errors_with_exit_status(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.manifest(name="foo")
    project.write_raw("README.md", "### Deep\n")

    with pytest.raises(SystemExit) as excinfo:
        main([str(project.path())])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "badgeup:" in err
    assert "depth 3" in err
    assert project.read("README.md") == "### Deep\n"


def test_main_reports_unopenable_log_file(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.manifest(name="foo")
    project.write_raw("README.md", "# Title\n")
    log_file = project.path() / "missing" / "run.log"

    with pytest.raises(SystemExit) as excinfo:
        main([str(project.path()), "--log-file", str(log_file)])

    assert excinfo.value.code == 1
    assert "cannot open log file" in capsys.readouterr().err
    assert project.read("README.md") == "# Title\n"
