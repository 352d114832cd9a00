import io

import pytest

from telnetkit.cmdline import (
    APP_NAME,
    APP_VERSION,
    EXECUTABLE_NAME,
    CmdlineOption,
    CmdlineParser,
    CmdLineUtil,
)


@pytest.fixture
def parser():
    p = CmdlineParser()
    p.reset(["prog", "--list", "servers", "-v"])
    return p


def test_option_is_valid():
    opt = CmdlineOption(["-h", "--help"], "Show help")
    assert opt.is_valid("--help")
    assert opt.is_valid("-h")
    assert not opt.is_valid("--version")


def test_option_equality_uses_spellings_only():
    assert CmdlineOption(["-h"], "a") == CmdlineOption(["-h"], "b")
    assert not CmdlineOption(["-h"], "a") == CmdlineOption(["-v"], "a")


def test_reset_skips_program_name(parser):
    assert parser.tokens == ["--list", "servers", "-v"]


def test_reset_appends(parser):
    parser.reset(["prog", "-x"])
    assert parser.tokens == ["--list", "servers", "-v", "-x"]


def test_get_cmd_option(parser):
    assert parser.get_cmd_option("--list") == "servers"
    assert parser.get_cmd_option("-v") == ""
    assert parser.get_cmd_option("--missing") == ""


def test_cmd_option_exists(parser):
    assert parser.cmd_option_exists("-v")
    assert not parser.cmd_option_exists("--version")


def test_is_set(parser):
    assert parser.is_set(CmdlineOption(["-v", "--version"], ""))
    assert not parser.is_set(CmdlineOption(["-h", "--help"], ""))


def test_invalid_token(parser):
    parser.add_option(CmdlineOption(["-l", "--list"], ""))
    parser.add_option(CmdlineOption(["-v", "--version"], ""))
    assert parser.invalid_token()
    parser.add_option(CmdlineOption(["servers"], ""))
    assert not parser.invalid_token()


def test_empty_parser_has_no_invalid_token():
    assert CmdlineParser().invalid_token() is False


def test_initialize_parser_returns_loaded_parser():
    util = CmdLineUtil()
    result = util.initialize_parser(["prog", "-h"])
    assert result is util.parser
    assert result.cmd_option_exists("-h")


def test_print_title():
    out = io.StringIO()
    CmdLineUtil().print_title(out)
    assert f"{APP_NAME} {APP_VERSION} - Windows Service Manipulator" in out.getvalue()
    assert out.getvalue().startswith("\n")


def test_print_usage_holds_title_and_syntax():
    out = io.StringIO()
    CmdLineUtil().print_usage(out)
    text = out.getvalue()
    assert APP_NAME in text
    assert "Syntax:" in text
    assert f" {EXECUTABLE_NAME} [command] [options]" in text
    assert text.index(APP_NAME) < text.index("Syntax:")


def test_print_examples_and_description():
    out = io.StringIO()
    util = CmdLineUtil()
    util.print_description(out)
    util.print_examples(out)
    text = out.getvalue()
    assert text.startswith("Description:\n")
    assert "Examples:" in text
    assert f" {EXECUTABLE_NAME} --run-tests" in text


def test_error_commands():
    out = io.StringIO()
    CmdLineUtil().error_commands(out)
    assert "Error: no command given.\nuse -h or --help for help.\n" in out.getvalue()


def test_default_stream_is_stdout(capsys):
    CmdLineUtil().print_syntax()
    assert capsys.readouterr().out.startswith("Syntax:\n")