"""Runner module - test orchestration."""

from .executor import CaseResult, RunResult, TestRunner
from .output_dir import remove_output, scoped_output_dir
from .process import run_process

__all__ = [
    "CaseResult",
    "RunResult",
    "TestRunner",
    "remove_output",
    "scoped_output_dir",
    "run_process",
]
