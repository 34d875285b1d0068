from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator

from strictcheck.config import RunnerSettings
from strictcheck.expression import TestExpression, as_expression
from strictcheck.style import Terminal, bright_red, green
from strictcheck.verbose import setup_logger


class TestRunner:
    """Evaluates named groups of test expressions and reports failures.

    A runner keeps no state between groups unless ``track_failures`` is set,
    in which case the names of failed groups collect in ``failed_groups``.
    """

    __test__ = False

    def __init__(
        self,
        settings: RunnerSettings | None = None,
        file: IO[str] | None = None,
        logger: logging.Logger | None = None,
        track_failures: bool = False,
    ):
        self.settings = settings or RunnerSettings()
        self.terminal = Terminal(self.settings.color, file=file)
        self.logger = logger or logging.getLogger(__name__)
        self.track_failures = track_failures
        self.failed_groups: list[str] = []

    @classmethod
    def from_settings(
        cls,
        settings: RunnerSettings,
        file: IO[str] | None = None,
        logger_name: str = "strictcheck_run",
        track_failures: bool = False,
    ) -> TestRunner:
        """Build a runner whose logger follows ``settings.debug_log``/``verbose``."""
        logger = None
        if settings.debug_log is not None or settings.verbose:
            debug_file = Path(settings.debug_log) if settings.debug_log else None
            logger = setup_logger(
                debug_file, verbose=settings.verbose, logger_name=logger_name
            )
        return cls(
            settings=settings,
            file=file,
            logger=logger,
            track_failures=track_failures,
        )

    def run_group(self, name: Any, *expressions: Any) -> bool:
        """Evaluate every expression in order and return whether all passed.

        Every expression runs regardless of earlier failures. Each failure is
        printed as soon as it is detected, and a PASSED/FAILED banner closes
        the group. An empty group passes without a banner.
        """
        forms = [as_expression(e) for e in expressions]

        if not forms:
            self.terminal.echo(f"Done testing {name}.")
            if isinstance(name, bool):
                self.terminal.echo(
                    f"{bright_red('WARN')}: test name ({name}) is a boolean.  "
                    "First form may not have been tested correctly."
                )
                self.logger.debug(f"Group name {name!r} is a boolean")
            return True

        self.logger.debug(f"Running group {name} ({len(forms)} expression(s))")
        passed = True
        for expression in forms:
            outcome = self._check(name, expression)
            passed &= outcome

        banner = green("PASSED") if passed else bright_red("FAILED")
        self.terminal.echo(f"{banner}\n")
        if not passed and self.track_failures:
            self.failed_groups.append(str(name))
        self.logger.debug(f"Group {name} {'passed' if passed else 'failed'}")
        return passed

    def _check(self, name: Any, expression: TestExpression) -> bool:
        self.logger.debug(f"Evaluating {expression.source_text}")
        try:
            outcome = expression.evaluate()
        except Exception as e:
            if self.settings.on_error == "raise":
                raise
            self.logger.debug(
                f"Expression {expression.source_text} raised {type(e).__name__}: {e}"
            )
            self._report_failure(
                name, expression, detail=f"\traised {type(e).__name__}: {e}\n"
            )
            return False

        if not outcome:
            self._report_failure(name, expression)
        return outcome

    def _report_failure(
        self, name: Any, expression: TestExpression, detail: str = ""
    ) -> None:
        self.terminal.echo(
            f"{bright_red('FAILED')} {name}: expected\n"
            f"\t{expression.source_text}\n{detail}"
        )


_default_runner = TestRunner()


def get_runner() -> TestRunner:
    return _default_runner


@contextmanager
def use_runner(runner: TestRunner) -> Iterator[TestRunner]:
    """Make ``runner`` the default for ``run_group`` within the block."""
    global _default_runner
    previous = _default_runner
    _default_runner = runner
    try:
        yield runner
    finally:
        _default_runner = previous


def run_group(name: Any, *expressions: Any, runner: TestRunner | None = None) -> bool:
    """Run a named group of test expressions on ``runner`` or the default one."""
    return (runner or get_runner()).run_group(name, *expressions)
