"""Tests for the ``standards`` command-line entrypoints."""

from __future__ import annotations

from pathlib import Path

import pytest

from standards_pages import cli


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small standards project and make it the working directory."""
    (tmp_path / "rulesets").mkdir()
    (tmp_path / "guidelines").mkdir()
    (tmp_path / "rulesets" / "python-internal.toml").write_text(
        "[ruff]\nline-length = 100\n", encoding="utf-8"
    )
    (tmp_path / "rulesets" / "broken.toml").write_text("[ruff\n", encoding="utf-8")
    (tmp_path / "guidelines" / "naming.md").write_text(
        "---\nid: naming\ntitle: Naming\ncategory: style\npriority: 1\n---\n# Naming\n",
        encoding="utf-8",
    )
    (tmp_path / "guidelines" / "draft.md").write_text(
        "# No front matter\n", encoding="utf-8"
    )
    (tmp_path / "standards.yaml").write_text(
        "paths:\n  rulesets_dir: rulesets\n  guidelines_dir: guidelines\n"
        "  output_dir: generated\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_generate_reports_written_and_skipped_files(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Every written file and every rejected source gets one line."""
    cli.generate(config=Path("standards.yaml"))
    lines = capsys.readouterr().out.splitlines()

    skipped = [line for line in lines if line.startswith("skipped ")]
    assert len(skipped) == 2, f"expected two skipped sources, got {skipped!r}"
    assert skipped[0].startswith("skipped rulesets/broken.toml: "), skipped[0]
    assert skipped[1].startswith("skipped guidelines/draft.md: "), skipped[1]
    assert "no front matter" in skipped[1], skipped[1]

    assert "wrote generated/rulesets/python-internal.md" in lines, lines
    assert "wrote generated/site/guidelines/naming.md" in lines, lines
    assert "wrote generated/site/index.md" in lines, lines
    assert (project / "generated" / "site" / "_config.yml").is_file()


def test_generate_honours_output_dir(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The output override replaces the configured folder."""
    cli.generate(config=Path("standards.yaml"), output_dir=Path("dist"))
    out = capsys.readouterr().out
    assert "wrote dist/site/rulesets/index.md" in out, out
    assert not (project / "generated").exists(), "expected nothing in the default"


def test_rulesets_command_writes_exports_only(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The rulesets command writes plain exports without the site."""
    cli.rulesets(config=Path("standards.yaml"))
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "wrote generated/rulesets/python-internal.md", lines
    assert not (project / "generated" / "site").exists(), "expected no site output"


def test_rulesets_command_without_sources(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """An empty rulesets folder is reported rather than treated as an error."""
    for path in (project / "rulesets").iterdir():
        path.unlink()
    cli.rulesets(config=Path("standards.yaml"))
    assert capsys.readouterr().out.strip() == "no rulesets found in rulesets"


def test_missing_config_raises(project: Path) -> None:
    """A missing configuration file propagates as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        cli.generate(config=project / "absent.yaml")


def test_app_dispatches_generate(project: Path) -> None:
    """The Cyclopts app routes ``generate`` with its options."""
    command, bound, _ignored = cli.app.parse_args(
        ["generate", "--config", "standards.yaml", "--output-dir", "site-out"]
    )
    assert command is cli.generate, f"expected generate, got {command!r}"
    command(*bound.args, **bound.kwargs)
    assert (project / "site-out" / "site" / "index.md").is_file()
