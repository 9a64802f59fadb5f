"""CLI parser and command behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from barrelgen.cli import _build_parser, main
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    before = parser.parse_args(["--verbose", "validate"])
    after = parser.parse_args(["validate", "--verbose"])

    assert before.verbose is True and before.command == "validate"
    assert after.verbose is True and after.path == "."


def test_cli_generate_accepts_single_barrel_or_all() -> None:
    parser = _build_parser()

    single = parser.parse_args(["generate", "src/types/index.ts"])
    batch = parser.parse_args(["generate", "--all", "--root", "project"])

    assert single.barrel == "src/types/index.ts" and single.all is False
    assert batch.all is True and batch.barrel is None and batch.root == "project"


def test_cli_generate_requires_a_target() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["generate"])


def test_generate_prints_preview_without_writing(
    project_builder: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write(
        {
            "src/a.ts": "export interface A {}\nexport const b = 1;\n",
            "src/index.ts": "export * from './a';\n",
        }
    )
    root = str(project_builder.path())

    main(["generate", "src/index.ts", "--root", root])

    out = capsys.readouterr().out
    assert out == "export type {\n  A,\n} from './a';\n\nexport {\n  b,\n} from './a';\n"
    assert project_builder.read("src/index.ts") == "export * from './a';\n"


def test_generate_all_reports_each_file(
    project_builder: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write(
        {
            ".barrelgen.yml": "synthesis:\n  barrels: [src/index.ts]\n",
            "src/a.ts": "export const a = 1;\n",
            "src/index.ts": "export * from './a';\nexport * from './b';\n",
        }
    )

    main(["generate", "--all", "--root", str(project_builder.path())])

    out = capsys.readouterr().out
    assert "Warning: File not found:" in out
    assert "Updated " in out
    assert project_builder.read("src/index.ts") == "export {\n  a,\n} from './a';\n"


def test_validate_command_writes_report(
    project_builder: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write({"src/a.ts": "export const a = 1;\n"})

    main(["validate", str(project_builder.path())])

    out = capsys.readouterr().out
    assert "Found 2 issues." in out
    assert (project_builder.path() / ".barrelgen" / "export-validation.md").is_file()


def test_missing_source_root_exits_non_zero(
    project_builder: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(project_builder.path())])

    assert excinfo.value.code == 1
    assert "Source root not found" in capsys.readouterr().err


def test_log_file_option_writes_records(
    project_builder: ProjectBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write({"src/index.ts": "", "src/a.ts": "export const a = 1;\n"})
    log_file = tmp_path / "barrelgen.log"

    main(["--log-file", str(log_file), "validate", str(project_builder.path())])

    capsys.readouterr()
    assert "Export validation complete. Found 0 issues." in log_file.read_text(encoding="utf-8")
