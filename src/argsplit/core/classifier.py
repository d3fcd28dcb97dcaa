"""Classification of raw argument vectors into positionals and scoped options.

Tokens after the invocation path are read left to right. Tokens that do not
start with a dash are positional arguments. Options start out in program
scope; a bare ``--`` switches every following option to command scope. The
switch is one-way and is only accepted before the first positional argument.

Example:
    >>> cli = ArgumentClassifier().classify(["prog", "-v", "--", "-x", "run"])
    >>> cli.program_options.to_list(), cli.cmd_options.to_list(), cli.args.to_list()
    (['-v'], ['-x'], ['run'])
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from argsplit.core.array import DEFAULT_CAPACITY, MAX_CAPACITY, Growth, StringArray
from argsplit.core.diagnostics import Diagnostics
from argsplit.core.errors import FatalError, Outcome, SeparatorError, UserError

if TYPE_CHECKING:
    from argsplit.config.schema import Config

logger = logging.getLogger(__name__)

SEPARATOR = "--"


class Scope(Enum):
    """Which option group dash-prefixed tokens go to."""

    PROGRAM = auto()
    COMMAND = auto()


@dataclass
class ParsedCommandLine:
    """Classified command line.

    The arrays stay None when the vector held nothing but the invocation path.

    Attributes:
        execfile: Invocation path (argv[0])
        args: Positional arguments
        cmd_options: Options following the separator
        program_options: Options preceding the separator
    """

    execfile: str
    args: StringArray | None = None
    cmd_options: StringArray | None = None
    program_options: StringArray | None = None

    @property
    def allocated(self) -> bool:
        """Whether the three arrays were created."""
        return self.args is not None

    def release(self) -> None:
        """Release every allocated array. Safe on an unallocated result."""
        for array in (self.args, self.cmd_options, self.program_options):
            if array is not None:
                array.release()

    def __enter__(self) -> ParsedCommandLine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


@dataclass
class ParseResult:
    """Outcome of parse() together with the classified command line."""

    outcome: Outcome
    cli: ParsedCommandLine | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def exit_code(self) -> int:
        return int(self.outcome)


class ArgumentClassifier:
    """Splits argument vectors into positionals, program and command options."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        growth: Growth = "double",
        max_capacity: int = MAX_CAPACITY,
    ) -> None:
        self.capacity = capacity
        self.growth = growth
        self.max_capacity = max_capacity

    @classmethod
    def from_config(cls, config: Config) -> ArgumentClassifier:
        return cls(
            capacity=config.arrays.default_capacity,
            growth=config.arrays.growth,
            max_capacity=config.arrays.max_capacity,
        )

    def _new_array(self, what: str) -> StringArray:
        return StringArray(
            self.capacity,
            growth=self.growth,
            max_capacity=self.max_capacity,
            what=what,
        )

    def classify(self, argv: Sequence[str]) -> ParsedCommandLine:
        """Classify an argument vector.

        Args:
            argv: Full argument vector, invocation path first

        Returns:
            The classified command line

        Raises:
            SeparatorError: The separator follows a positional argument
            AllocationError: Storage for an array could not be obtained
            CapacityError: An array cannot hold another token
        """
        if not argv:
            raise ValueError("Argument vector must contain the invocation path")

        execfile, tokens = argv[0], argv[1:]
        if not tokens:
            return ParsedCommandLine(execfile=execfile)

        # Arrays created before a failing one are left to the caller
        cli = ParsedCommandLine(execfile=execfile)
        cli.args = self._new_array("CLI arguments")
        cli.cmd_options = self._new_array("command options")
        cli.program_options = self._new_array("program options")

        scope = Scope.PROGRAM
        for token in tokens:
            if not token.startswith("-"):
                cli.args.append(token)
            elif token == SEPARATOR:
                if len(cli.args):
                    raise SeparatorError(token, cli.args.last or "")
                if scope is Scope.PROGRAM:
                    logger.debug("Switching to command scope")
                scope = Scope.COMMAND
            elif scope is Scope.COMMAND:
                cli.cmd_options.append(token)
            else:
                cli.program_options.append(token)

        logger.debug(
            "Classified %d positional(s), %d program option(s), %d command option(s)",
            len(cli.args),
            len(cli.program_options),
            len(cli.cmd_options),
        )
        return cli


def classify(argv: Sequence[str]) -> ParsedCommandLine:
    """Classify an argument vector with default settings."""
    return ArgumentClassifier().classify(argv)


def parse(
    argv: Sequence[str],
    *,
    classifier: ArgumentClassifier | None = None,
    diagnostics: Diagnostics | None = None,
) -> ParseResult:
    """Classify argv, reporting failures as diagnostics.

    Args:
        argv: Full argument vector, invocation path first
        classifier: Classifier to use (default settings if omitted)
        diagnostics: Where failures are reported (stderr if omitted)

    Returns:
        ParseResult with Outcome.OK and the command line, or the failure
        outcome and no command line
    """
    classifier = classifier or ArgumentClassifier()
    diagnostics = diagnostics or Diagnostics()

    try:
        cli = classifier.classify(argv)
    except UserError as e:
        diagnostics.error("CLI error", e.message)
        return ParseResult(outcome=Outcome.USER)
    except FatalError as e:
        diagnostics.error("Memory error", e.message)
        return ParseResult(outcome=Outcome.FATAL)

    return ParseResult(outcome=Outcome.OK, cli=cli)
