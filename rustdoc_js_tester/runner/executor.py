"""Test runner - drives rustdoc and the rustdoc-js checker.

For every fixed test case, in order:
1. Announce the case
2. Generate documentation for the fixture
3. Check the generated search index
4. Remove the generated output

Failures of either tool show up only through the tool's own output;
the loop always runs every case and always cleans up.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from ..suite.schema import TestCase, ToolLayout, default_test_cases
from .output_dir import scoped_output_dir
from .process import run_process

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str]], int]


@dataclass
class CaseResult:
    """Exit statuses observed for one test case."""
    name: str
    generator_exit: int
    checker_exit: int
    duration_ms: int = 0

    @property
    def passed(self) -> bool:
        return self.generator_exit == 0 and self.checker_exit == 0


@dataclass
class RunResult:
    """Everything observed during one run."""
    toolchain: str
    cases: list[CaseResult] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def all_passed(self) -> bool:
        return all(c.passed for c in self.cases)

    @property
    def passed_count(self) -> int:
        return sum(1 for c in self.cases if c.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for c in self.cases if not c.passed)

    @property
    def total_count(self) -> int:
        return len(self.cases)


class TestRunner:
    """Runs the rustdoc-js test cases against one toolchain build."""

    def __init__(
        self,
        toolchain: str,
        layout: Optional[ToolLayout] = None,
        test_cases: Optional[Sequence[TestCase]] = None,
        run_command: Optional[CommandRunner] = None,
    ):
        """Initialize the runner.

        Args:
            toolchain: Target triple whose stage1 rustdoc is tested.
            layout: Tool and fixture locations. Defaults to the in-tree layout.
            test_cases: Cases to run. Defaults to the fixed list.
            run_command: Runs one command and returns its exit status.
                Defaults to run_process.
        """
        self.toolchain = toolchain
        self.layout = layout or ToolLayout()
        self.test_cases = tuple(test_cases) if test_cases is not None else default_test_cases()
        self.run_command = run_command or run_process

    def run(self) -> RunResult:
        """Run every test case in order.

        Returns:
            RunResult with the exit statuses of every invocation.
        """
        start_time = time.time()
        result = RunResult(toolchain=self.toolchain)

        for case in self.test_cases:
            result.cases.append(self.run_case(case))

        result.duration_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            "Finished %d case(s) for %s in %d ms",
            result.total_count, self.toolchain, result.duration_ms,
        )
        return result

    def run_case(self, case: TestCase) -> CaseResult:
        """Generate, check and clean up a single test case."""
        start_time = time.time()
        print(f"Checking '{case.name}'...", flush=True)

        with scoped_output_dir(case.output_dir(self.layout)):
            generator_exit = self.run_command(
                self.layout.generator_command(self.toolchain, case)
            )
            checker_exit = self.run_command(self.layout.checker_command(case))

        if generator_exit != 0 or checker_exit != 0:
            logger.debug(
                "Case %s: generator exited %d, checker exited %d",
                case.name, generator_exit, checker_exit,
            )

        return CaseResult(
            name=case.name,
            generator_exit=generator_exit,
            checker_exit=checker_exit,
            duration_ms=int((time.time() - start_time) * 1000),
        )
