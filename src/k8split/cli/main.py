#!/usr/bin/env python3
"""
K8SPLIT CLI
-----------
Command-line front end: parses flags, runs the SplitEngine and turns
fatal errors into a diagnostic plus a non-zero exit status.

Author: K8Split Team
Date: 2026-10-18
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from k8split.cli.formatter import ReportFormatter
from k8split.core.engine import SplitEngine, SplitOptions
from k8split.core.errors import K8SplitError, UsageError

VERSION = "k8split v1.0.0"

# Global console for consistent styling across the application
console = Console()


class K8SplitCLI:
    """
    CLI wrapper that translates flags into a single engine run.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="k8split",
            description="Split a composite yaml file into multiple distinct files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Files are named <kind>__<name>__<namespace>.yaml"
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("file", nargs="?", help="Composite YAML file to split")
        self.parser.add_argument("-o", "--outdir", default=".", help="The name of the directory.")
        self.parser.add_argument("--dry-run", action="store_true", help="Preview results without writing")
        self.parser.add_argument("--detect-line-endings", action="store_true",
                                 help="Detect CRLF separators from file content on every platform")
        self.parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")

    def print_header(self, subtitle: str):
        console.print(Panel.fit(
            f"[bold cyan]{VERSION}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

        options = SplitOptions(
            output_dir=Path(args.outdir),
            dry_run=args.dry_run,
            detect_line_endings=args.detect_line_endings,
        )

        try:
            if not args.file:
                raise UsageError("requires an input file")
            if not args.quiet:
                self.print_header("Composite Manifest Splitter")
            report = SplitEngine(options).split(args.file)
        except K8SplitError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return 1

        if not args.quiet:
            formatter = ReportFormatter(console)
            formatter.print_final_table(report)
            formatter.print_summary(report)
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(K8SplitCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
