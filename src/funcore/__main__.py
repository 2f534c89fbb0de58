"""Lesson runner.

Walks through the functional core with the example records and prints each
outcome. Optionally verifies the algebraic laws of the stock witnesses.

Examples:
- python -m funcore
- python -m funcore --verify-laws --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from funcore.config import Config
from funcore.errors import FuncoreError
from funcore.functor import RESULT_FUNCTOR, TUPLE_FUNCTOR
from funcore.laws import check_functor_laws, check_monoid_laws
from funcore.lessons import (
    NumberOrder,
    Person,
    Plate,
    first_letter_of_plate,
    mutating_sum_abs,
    sum_abs,
    validate_plate,
)
from funcore.monoid import ALL, ANY, PRODUCT, STRING_CONCAT, SUM, collapse
from funcore.order import greatest, greatest_adapted, greatest_orderable
from funcore.result import failure, success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from funcore.errors import LawViolation
    from funcore.result import Result

logger = logging.getLogger("funcore.runner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m funcore",
        description="Run the functional core lessons.",
    )
    parser.add_argument(
        "--verify-laws",
        action="store_true",
        default=None,
        help="Check the laws of the stock Monoid and Functor witnesses.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides FUNCORE_LOG_LEVEL).",
    )
    return parser


def run_lessons() -> list[str]:
    """Run every lesson and return its printable outcome lines."""
    numbers = [-1, -2, -3, -5]
    mutated = list(numbers)
    lines = [
        f"sum_abs({numbers}) = {sum_abs(numbers)}; "
        f"input untouched: {numbers[0] < 0}",
        f"mutating_sum_abs({mutated}) = {mutating_sum_abs(mutated)}; "
        f"input untouched: {mutated[0] < 0}",
        f"greatest by compare: {greatest([3, 1, 4, 1, 5], lambda a, b: a - b)}",
    ]

    people = [Person("Juan", 23), Person("Pablo", 28)]
    lines.append(f"oldest person: {greatest_orderable(people).name}")
    lines.append(f"greatest adapted number: {greatest_adapted([1, 2, 3], NumberOrder)}")

    lines.append(f"collapse sum: {collapse(SUM, [1, 2, 3, 4])}")
    lines.append(f"collapse product: {collapse(PRODUCT, [1, 2, 3, 4])}")
    lines.append(
        f"collapse string: {collapse(STRING_CONCAT, ['Hello', ', ', 'world', '!'])}"
    )

    for plate in (Plate("pasta", 12.0), Plate("", 12.0), Plate("soup", -1.0)):
        outcome = (
            validate_plate(plate)
            .map_failure(str)
            .fold(lambda message: f"invalid ({message})", lambda p: f"valid {p.name}")
        )
        lines.append(f"validate {plate}: {outcome}")

    letter = first_letter_of_plate(Plate("pasta", 12.0)).get_or_throw()
    lines.append(f"first letter of pasta: {letter}")
    missing = first_letter_of_plate(Plate("", 12.0)).get_or_else("?")
    lines.append(f"first letter of unnamed plate: {missing}")
    return lines


def verify_laws() -> list[Result[None, LawViolation]]:
    """Check the stock witnesses against small sample sets."""
    checks = [
        check_monoid_laws(SUM, [0, 1, -2, 7]),
        check_monoid_laws(PRODUCT, [1, 2, -3, 0]),
        check_monoid_laws(STRING_CONCAT, ["", "a", "bc"]),
        check_monoid_laws(ALL, [True, False]),
        check_monoid_laws(ANY, [True, False]),
    ]
    double = lambda x: x * 2  # noqa: E731
    increment = lambda x: x + 1  # noqa: E731
    for container in (success(5), failure("boom")):
        checks.append(check_functor_laws(RESULT_FUNCTOR, container, double, increment))
    checks.append(check_functor_laws(TUPLE_FUNCTOR, (1, 2, 3), double, increment))
    return checks


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = Config.from_env(log_level=args.log_level, verify_laws=args.verify_laws)
    except FuncoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"hint: {exc.hint}", file=sys.stderr)
        return 2
    logging.basicConfig(level=config.log_level_number)
    logger.info("Running lessons with %s", config)

    for line in run_lessons():
        print(line)

    if not config.verify_laws:
        return 0

    violations = [
        violation
        for check in verify_laws()
        for violation in check.fold(lambda err: [err], lambda _: [])
    ]
    for violation in violations:
        print(f"law violated [{violation.law}]: {violation}")
    if violations:
        return 1
    print("all laws hold")
    return 0


if __name__ == "__main__":
    sys.exit(main())
