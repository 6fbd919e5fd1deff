"""CLI entry point for the rustdoc-js tester.

Invoked from the root of a Rust checkout:
    rustdoc-js-tester <toolchain> [options]
    python -m rustdoc_js_tester.cli <toolchain> [options]
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .reporting.json_reporter import JsonReporter, report_file_name
from .runner.executor import RunResult, TestRunner
from .suite.parser import parse_layout
from .suite.schema import ToolLayout

USAGE_EXAMPLE = "x86_64-apple-darwin"


def usage_line(prog_name: str) -> str:
    return f"Usage: {prog_name} <toolchain> (e.g. {USAGE_EXAMPLE})"


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.argument("args", nargs=-1, metavar="[TOOLCHAIN] [EXTRA]...")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML file overriding tool and fixture locations.",
)
@click.option("--save-report", is_flag=True, help="Save a JSON report of the run.")
@click.option(
    "--report-dir",
    type=click.Path(path_type=Path),
    help="Directory for saved reports (default: current directory).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    config_path: Optional[Path],
    save_report: bool,
    report_dir: Optional[Path],
    verbose: bool,
) -> None:
    """Check rustdoc's search index against the rustdoc-js fixtures.

    TOOLCHAIN names the build whose stage1 rustdoc is tested. Options go
    before it; everything after it is ignored, option-like words included.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args:
        print(usage_line(ctx.info_name or "rustdoc-js-tester"))
        return

    toolchain = args[0]

    layout = ToolLayout()
    if config_path is not None:
        try:
            layout = parse_layout(config_path)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    runner = TestRunner(toolchain=toolchain, layout=layout)

    try:
        result = runner.run()
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(130)

    if save_report:
        _save_report(result, report_dir)


def _save_report(result: RunResult, report_dir: Optional[Path]) -> Optional[Path]:
    """Save the run report; a failure only warns."""
    reporter = JsonReporter()
    report_path = (report_dir or Path(".")) / report_file_name(result.toolchain)

    try:
        saved_path = reporter.save(reporter.generate(result), report_path)
    except OSError as e:
        print(f"Warning: Failed to save report: {e}", file=sys.stderr)
        return None

    print(f"Report saved: {saved_path}")
    return saved_path


def main() -> None:
    """Main CLI entry point."""
    cli(prog_name=sys.argv[0])


if __name__ == "__main__":
    main()
