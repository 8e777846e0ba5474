from __future__ import annotations

import io

import pytest
from rich.console import Console

from lstheme.app import LsThemeApp
from lstheme.main import build_parser
from lstheme.options import UseColours


def make_app(env, stdin_text=""):
    output = io.StringIO()
    console = Console(file=output, force_terminal=True, color_system="standard", width=200)
    app = LsThemeApp(env=env, stdin=io.StringIO(stdin_text), console=console)
    return app, output


def run(app, argv, tmp_path):
    args = build_parser().parse_args(["--config", str(tmp_path / "missing.yaml"), *argv])
    return app.main(args)


def test_listing_paints_globs(tmp_path):
    app, output = make_app({"LS_COLORS": "*.txt=31"})

    assert run(app, ["--color=always", "notes.txt"], tmp_path) == 0

    text = output.getvalue()
    assert "notes.txt" in text
    assert "\x1b[31m" in text


def test_never_prints_no_escape_codes(tmp_path):
    app, output = make_app({"LS_COLORS": "*.txt=31"})

    assert run(app, ["--color=never", "notes.txt"], tmp_path) == 0

    assert output.getvalue() == "notes.txt\n"
    assert app.options.use_colours is UseColours.NEVER


def test_directories_use_directory_style(tmp_path):
    (tmp_path / "src").mkdir()
    app, output = make_app({"LS_COLORS": "di=32:*=31"})

    run(app, ["--color=always", str(tmp_path / "src")], tmp_path)

    assert "\x1b[32msrc" in output.getvalue()


def test_names_from_stdin(tmp_path):
    app, output = make_app({}, stdin_text="a.txt\nb.md\n")

    run(app, ["--color=never", "--stdin"], tmp_path)

    assert output.getvalue().splitlines() == ["a.txt", "b.md"]


def test_config_supplies_colours(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("color: always\ncolors:\n  exa: 'reset:*.md=34'\n", encoding="utf-8")
    app, output = make_app({})

    args = build_parser().parse_args(["--config", str(config_path), "notes.md"])
    assert app.main(args) == 0

    assert "\x1b[34mnotes.md" in output.getvalue()


def test_styles_table(tmp_path):
    app, output = make_app({})

    assert run(app, ["--color=always", "--styles"], tmp_path) == 0

    text = output.getvalue()
    assert "filekinds.directory" in text
    assert "security_context.selinux.range" in text


def test_bad_option_exits_with_options_error(tmp_path, capsys):
    app, _ = make_app({})

    assert run(app, ["--color=sometimes"], tmp_path) == 3

    assert "sometimes" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--colour", "--color"])
def test_colour_spellings(flag):
    args = build_parser().parse_args([f"{flag}=never"])

    assert args.color == "never"


def test_compiled_check_only_in_directory_listings(tmp_path, monkeypatch):
    (tmp_path / "Main.hs").write_text("main = pure ()\n", encoding="utf-8")
    (tmp_path / "Main.hi").write_bytes(b"")
    monkeypatch.chdir(tmp_path)

    named, named_output = make_app({})
    run(named, ["--color=always", "Main.hi"], tmp_path)

    listed, listed_output = make_app({})
    run(listed, ["--color=always"], tmp_path)

    assert named_output.getvalue() == "Main.hi\n"
    assert "\x1b[33mMain.hi" in listed_output.getvalue()
