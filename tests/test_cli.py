"""CLI behaviour tests."""

from __future__ import annotations

import importlib

import pytest

from linkhub.cli import _build_parser, main
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    assert parser.parse_args(["--verbose", "build"]).verbose is True
    assert parser.parse_args(["build", "--verbose"]).verbose is True
    assert parser.parse_args(["build"]).path == "."


def test_cli_watch_options() -> None:
    args = _build_parser().parse_args(["watch", "site", "--port", "8081", "--host", "127.0.0.1"])

    assert args.command == "watch"
    assert args.path == "site"
    assert args.port == 8081
    assert args.host == "127.0.0.1"


@pytest.mark.parametrize("argv", [[], ["serve"]])
def test_cli_rejects_unknown_invocations(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code != 0
    assert "usage: linkhub" in capsys.readouterr().err


def test_build_command_writes_output(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    project.profile("name: Ada\nlinks:\n  - {title: Blog, url: 'https://x.test', icon: rss}\n")
    project.theme()

    main(["build", str(project.root)])

    assert (project.output / "index.html").exists()
    assert "Build complete!" in capsys.readouterr().out


def test_build_with_malformed_profile_exits_without_output(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.profile("name: Ada\nlinks: [unclosed\n")
    project.theme()

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(project.root)])

    assert excinfo.value.code == 1
    assert "Build failed (load profile)" in capsys.readouterr().err
    assert not project.output.exists()


def test_build_with_missing_theme_reports_stage(project: ProjectBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    project.profile("theme: ghost\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(project.root)])

    assert excinfo.value.code == 1
    assert "Build failed (resolve theme)" in capsys.readouterr().err
    assert not project.output.exists()


def test_build_with_broken_template_reports_render_stage(
    project: ProjectBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    project.profile("name: Ada\n")
    project.theme(files={"template.html": "{% if %}"})

    with pytest.raises(SystemExit) as excinfo:
        main(["build", str(project.root)])

    assert excinfo.value.code == 1
    assert "Build failed (render page)" in capsys.readouterr().err


def test_fresh_project_builds_with_bundled_theme(project: ProjectBuilder) -> None:
    project.profile(
        """
        name: Ada
        links:
          - {title: Code, url: 'https://github.com/ada', icon: github}
        """
    )

    main(["build", str(project.root)])

    html = (project.output / "index.html").read_text(encoding="utf-8")
    assert "<h1>Ada</h1>" in html
    assert 'href="https://github.com/ada"' in html
    assert (project.output / "styles" / "base.css").is_file()


def test_importing_main_module_does_not_run_cli() -> None:
    module = importlib.import_module("linkhub.__main__")

    assert module.main is main
