"""Test case and tool layout models for the rustdoc-js tester.

The test case list is fixed: every run checks the same fixtures in the
same order.
"""

from dataclasses import dataclass
from pathlib import Path

TEST_NAMES: tuple[str, ...] = (
    "basic",
    "exact-match",
    "module-substring",
    "search-short-types",
    "substring",
)

FIXTURE_SUFFIX = ".rs"


@dataclass(frozen=True)
class ToolLayout:
    """Locations of the generator, the checker and the fixtures.

    Relative paths are resolved against the current working directory.
    """
    build_root: str = "build"
    stage: str = "stage1"
    bin_dir: str = "bin"
    generator_name: str = "rustdoc"
    fixture_root: str = "src/test/rustdoc-js"
    checker_runtime: str = "node"
    checker_script: str = "src/tools/rustdoc-js/tester.js"

    def generator_path(self, toolchain: str) -> Path:
        """Path of the generator binary built for `toolchain`."""
        return (
            Path(self.build_root)
            / toolchain
            / self.stage
            / self.bin_dir
            / self.generator_name
        )

    def generator_command(self, toolchain: str, case: "TestCase") -> list[str]:
        """Command line that documents the fixture of `case`."""
        return [
            str(self.generator_path(toolchain)),
            "-o",
            str(case.output_dir(self)),
            str(case.source_file(self)),
        ]

    def checker_command(self, case: "TestCase") -> list[str]:
        """Command line that checks the generated output of `case`."""
        return [
            self.checker_runtime,
            self.checker_script,
            self.fixture_root,
            case.name,
        ]


LAYOUT_FIELDS = tuple(ToolLayout.__dataclass_fields__)


@dataclass(frozen=True)
class TestCase:
    """A single named rustdoc-js fixture."""
    name: str

    def output_dir(self, layout: ToolLayout) -> Path:
        return Path(layout.fixture_root) / self.name

    def source_file(self, layout: ToolLayout) -> Path:
        return Path(layout.fixture_root) / f"{self.name}{FIXTURE_SUFFIX}"


def default_test_cases() -> tuple[TestCase, ...]:
    """The fixed test cases, in declaration order."""
    return tuple(TestCase(name) for name in TEST_NAMES)
