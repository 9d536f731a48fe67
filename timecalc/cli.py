"""Command-line driver: ``timecalc LHS OPERATOR RHS``.

Everything, results included, is written to stderr.
"""

import logging
import sys
from collections.abc import Callable
from typing import IO, Any, TypeVar

import click

from timecalc import clock
from timecalc.arithmetic import combine
from timecalc.errors import CombineError, InvariantViolation, ParseError, abort
from timecalc.parser import parse_operand, parse_operator
from timecalc.presentation import render

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROGRAM = "timecalc"

USAGE = """\
USAGE
   Add duration to date:
       {program} DATE + DURATION

   Substract duration from date:
       {program} DATE - DURATION

   Duration between dates:
       {program} DATE - DATE

   Add durations:
       {program} DURATION + DURATION

   Substract durations:
       {program} DURATION - DURATION

SYNTAX
   DATE := [YYYY-MM-DD] [[hh:mm:ss] [(+|-)hh:mm]]
         | TODAY

   DURATION := [%years] [%months] [%weeks]
               [%days] [%hours] [%mins] [%secs]"""


class UsageFailure(click.ClickException):
    """A user error: one line of explanation plus a pointer to the usage text."""

    exit_code = 1

    def __init__(self, message: str, program: str = PROGRAM):
        super().__init__(message)
        self.program: str = program

    def show(self, file: IO[Any] | None = None) -> None:
        click.echo(f"error: {self.message}", err=True)
        click.echo(f"Try `{self.program}` for usage information.", err=True)


def usage_text(program: str = PROGRAM) -> str:
    return USAGE.format(program=program)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def calculate(tokens: tuple[str, ...], program: str = PROGRAM) -> str:
    """Evaluate ``LHS OPERATOR RHS`` and return the rendered result.

    Only the first three tokens are used.

    Raises:
        UsageFailure: For missing or malformed tokens and disallowed combinations
        InvariantViolation: If a date result cannot be represented
    """
    if len(tokens) < 2:
        raise UsageFailure("expected `+` or `-`", program)
    if len(tokens) < 3:
        raise UsageFailure("expected right operand", program)
    lhs_src, op_src, rhs_src = tokens[:3]

    def parse(what: str, parse_fn: Callable[[str], T], token: str) -> T:
        try:
            return parse_fn(token)
        except ParseError as exc:
            logger.debug("%s", exc)
            raise UsageFailure(f"{what} is illformed", program) from exc

    lhs = parse("left operand", parse_operand, lhs_src)
    op = parse("operator", parse_operator, op_src)
    rhs = parse("right operand", parse_operand, rhs_src)

    try:
        result = combine(lhs, op, rhs)
    except CombineError as exc:
        raise UsageFailure(str(exc), program) from exc

    return render(result)


@click.command(
    name=PROGRAM,
    add_help_option=False,
    context_settings={
        # Operands such as -5days must not be taken for options
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option("--verbose", is_flag=True, help="Log parsing and arithmetic steps.")
@click.option("--help", "show_help", is_flag=True, help="Show usage and exit.")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, verbose: bool, show_help: bool, tokens: tuple[str, ...]) -> None:
    """Add and subtract dates and durations."""
    configure_logging(verbose)

    try:
        clock.init_today()
    except InvariantViolation as exc:
        abort(str(exc))

    program = ctx.info_name or PROGRAM
    if show_help or not tokens:
        click.echo(usage_text(program), err=True)
        return

    try:
        output = calculate(tokens, program)
    except InvariantViolation as exc:
        abort(str(exc))
    click.echo(output, err=True)
