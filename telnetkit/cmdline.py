"""Command-line options, a small token parser and the program's help text."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

APP_NAME = "svcm"
APP_DESC = "Windows Service Manipulator"
EXECUTABLE_NAME = "svcm.exe"
APP_VERSION = "v1.0"


@dataclass
class CmdlineOption:
    """An option known by one or more spellings, with a description."""

    options: list[str]
    description: str = ""

    def __post_init__(self) -> None:
        self.options = list(self.options)

    def is_valid(self, option: str) -> bool:
        """Return True if ``option`` is one of this option's spellings."""
        return option in self.options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CmdlineOption):
            return NotImplemented
        return self.options == other.options

    def __hash__(self) -> int:
        return hash(tuple(self.options))


@dataclass
class CmdlineParser:
    """Holds the program's argument tokens and the options it accepts."""

    tokens: list[str] = field(default_factory=list)
    options: list[CmdlineOption] = field(default_factory=list)

    def reset(self, argv: Sequence[str]) -> None:
        """Append the arguments of ``argv`` (without the program name) to the tokens."""
        self.tokens.extend(str(arg) for arg in argv[1:])

    def get_cmd_option(self, option: str) -> str:
        """Return the token after the first ``option``, or "" if there is none."""
        try:
            index = self.tokens.index(option)
        except ValueError:
            return ""
        if index + 1 < len(self.tokens):
            return self.tokens[index + 1]
        return ""

    def cmd_option_exists(self, option: str) -> bool:
        """Return True if ``option`` is among the tokens."""
        return option in self.tokens

    def add_option(self, option: CmdlineOption) -> None:
        """Register an option as accepted."""
        self.options.append(option)

    def is_set(self, option: CmdlineOption) -> bool:
        """Return True if any spelling of ``option`` is among the tokens."""
        return any(self.cmd_option_exists(spelling) for spelling in option.options)

    def invalid_token(self) -> bool:
        """Return True if some token is not a spelling of any registered option."""
        return any(not self._option_valid(token) for token in self.tokens)

    def _option_valid(self, token: str) -> bool:
        return any(option.is_valid(token) for option in self.options)


def _write(out: TextIO | None, lines: Iterable[str]) -> None:
    stream = out if out is not None else sys.stdout
    for line in lines:
        stream.write(line + "\n")


class CmdLineUtil:
    """Parses the program's arguments and prints its help text."""

    def __init__(self) -> None:
        self.parser = CmdlineParser()

    def initialize_parser(self, argv: Sequence[str]) -> CmdlineParser:
        """Load ``argv`` into the parser and return it."""
        self.parser.reset(argv)
        return self.parser

    def print_title(self, out: TextIO | None = None) -> None:
        """Print the program's name, version and description."""
        _write(out, ["", f"{APP_NAME} {APP_VERSION} - {APP_DESC}", ""])

    def print_description(self, out: TextIO | None = None) -> None:
        """Print what the program does."""
        _write(out, [
            "Description:",
            "PLauncher executes a program locally with different privileges. "
            "It is mosly used to execute an app in admin mode.",
        ])

    def print_syntax(self, out: TextIO | None = None) -> None:
        """Print the command syntax and options."""
        _write(out, [
            "Syntax:",
            f" {EXECUTABLE_NAME} [command] [options]",
            "",
            " [-h --help]\n\tShow this help.",
            " [-v --version]\n\tShows installed codemeter sdk version.",
            " [-l --list] <options> <filters>\n\tList available license servers on the network.",
        ])

    def print_examples(self, out: TextIO | None = None) -> None:
        """Print usage examples."""
        _write(out, [
            "Examples:",
            f" {EXECUTABLE_NAME} --server-list\n\tDefault: list all licence network servers, "
            "remote and that have a FSB connected. Others are useless.",
            f" {EXECUTABLE_NAME} --server-list --firm 6000994\n\tlist all licence servers "
            "that have the Bodycad licence.",
            f" {EXECUTABLE_NAME} --server-list --local\n\tlist all licence servers including "
            "the local one.",
            f" {EXECUTABLE_NAME} --server-list --empty\n\tlist all licence servers including "
            "servers with no FSB or licences.",
            f" {EXECUTABLE_NAME} --run-tests\n\tExecute all the required tests for continuous "
            "integration.",
            "",
        ])

    def print_usage(self, out: TextIO | None = None) -> None:
        """Print the title followed by the syntax."""
        self.print_title(out)
        self.print_syntax(out)

    def error_commands(self, out: TextIO | None = None) -> None:
        """Print the title and a message saying no command was given."""
        self.print_title(out)
        _write(out, ["Error: no command given.", "use -h or --help for help.", ""])