"""Shared fixtures for rustdoc-js tester tests."""

from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

from rustdoc_js_tester.suite.schema import ToolLayout


class RecordingRunner:
    """Command runner that records invocations instead of running them.

    Generator invocations create the requested output directory, the way
    rustdoc would, unless `create_output` is False.
    """

    def __init__(
        self,
        layout: ToolLayout,
        generator_exit: int = 0,
        checker_exit: int = 0,
        create_output: bool = True,
        on_call: Optional[Callable[[list[str]], None]] = None,
    ):
        self.layout = layout
        self.generator_exit = generator_exit
        self.checker_exit = checker_exit
        self.create_output = create_output
        self.on_call = on_call
        self.calls: list[list[str]] = []
        self.existing_outputs: list[bool] = []

    def is_generator(self, command: Sequence[str]) -> bool:
        return command[0] != self.layout.checker_runtime

    def __call__(self, command: Sequence[str]) -> int:
        command = list(command)
        self.calls.append(command)
        if self.on_call:
            self.on_call(command)

        if self.is_generator(command):
            if self.create_output:
                out = Path(command[2])
                out.mkdir(parents=True, exist_ok=True)
                (out / "search-index.js").write_text("var searchIndex = {};")
            return self.generator_exit

        output_dir = Path(command[2]) / command[3]
        self.existing_outputs.append(output_dir.exists())
        return self.checker_exit

    @property
    def generator_calls(self) -> list[list[str]]:
        return [c for c in self.calls if self.is_generator(c)]

    @property
    def checker_calls(self) -> list[list[str]]:
        return [c for c in self.calls if not self.is_generator(c)]


@pytest.fixture
def layout(tmp_path: Path) -> ToolLayout:
    """Layout rooted in a temporary directory."""
    fixture_root = tmp_path / "src" / "test" / "rustdoc-js"
    fixture_root.mkdir(parents=True)
    return ToolLayout(
        build_root=str(tmp_path / "build"),
        fixture_root=str(fixture_root),
    )


@pytest.fixture
def recorder(layout: ToolLayout) -> RecordingRunner:
    return RecordingRunner(layout)
