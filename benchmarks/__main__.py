"""Benchmark harness CLI for Clockwall."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

console = Console()


def print_instructions() -> None:
    """Print benchmarking instructions."""
    console.print("\n[bold cyan]Clockwall Benchmark Harness[/bold cyan]\n")
    console.print("This harness measures the cost of rendering clock wall frames.\n")

    console.print("[yellow]Available benchmarks:[/yellow]")
    console.print("  • frame_bench - Full frame update/draw and minute-change re-targeting\n")

    console.print("[yellow]Usage:[/yellow]")
    console.print("  pytest benchmarks/frame_bench.py --benchmark-only")
    console.print("  pytest benchmarks/frame_bench.py --benchmark-only --benchmark-json=benchmarks/results/frame.json\n")

    console.print("[yellow]View results:[/yellow]")
    console.print("  python -m benchmarks --results\n")


def load_benchmark_results() -> Dict[str, Any]:
    """Load pytest-benchmark JSON files from benchmarks/results."""
    results_dir = Path(__file__).parent / "results"
    results: Dict[str, Any] = {}

    if not results_dir.exists():
        return results

    for result_file in sorted(results_dir.glob("*.json")):
        try:
            results[result_file.stem] = json.loads(result_file.read_text())
        except (OSError, json.JSONDecodeError) as e:
            console.print(f"[red]Error loading {result_file}: {e}[/red]")

    return results


def display_results(results: Dict[str, Any]) -> None:
    """Display mean/max timings per benchmark in a table."""
    if not results:
        console.print("[yellow]No benchmark results found.[/yellow]")
        console.print("Run benchmarks with: pytest benchmarks/frame_bench.py --benchmark-only --benchmark-json=...")
        return

    table = Table(title="Benchmark Results", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Benchmark", style="green")
    table.add_column("Mean (ms)", style="yellow")
    table.add_column("Max (ms)", style="magenta")

    for name, data in results.items():
        for bench in data.get("benchmarks", []):
            stats = bench.get("stats", {})
            table.add_row(
                name,
                bench.get("name", "?"),
                f"{stats.get('mean', 0) * 1000:.3f}",
                f"{stats.get('max', 0) * 1000:.3f}",
            )

    console.print(table)


def main() -> int:
    """Main entry point for benchmark harness."""
    parser = argparse.ArgumentParser(description="Clockwall Benchmark Harness")
    parser.add_argument(
        "--results",
        action="store_true",
        help="Display benchmark results",
    )

    args = parser.parse_args()

    if args.results:
        display_results(load_benchmark_results())
        return 0

    print_instructions()
    return 0


if __name__ == "__main__":
    sys.exit(main())
