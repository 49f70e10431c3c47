#!/usr/bin/env python3

from typing import Annotated, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typer import Argument, Exit, Option, Typer

from factorials.config import FactorialConfig
from factorials.lib import FactorialError, check_width
from factorials.log import configure_logging
from factorials.sequence import PrefixFactorials
from factorials.styles import compare

app = Typer(add_completion=False)


def print_comparison(console: Console, n: int, bits: int | None = None) -> bool:
    """Print every style's result for n and return whether they all agree."""
    results = compare(n)
    if bits is not None:
        for result in results.values():
            check_width(n, result, bits)
    table = Table(title=f"fact({n})")
    table.add_column("Style", style="cyan")
    table.add_column("Result", style="green", justify="right")
    for name, result in results.items():
        table.add_row(name, str(result))
    console.print(table)
    return len(set(results.values())) == 1


@app.command()
def main(
    n: Annotated[int, Argument(min=0, help="The input n of fact(n)")],
    style: Annotated[
        str, Option(envvar="FACTORIALS_STYLE", help="Implementation style to compute with.")
    ] = "idiomatic",
    workers: Annotated[
        int, Option(min=1, envvar="FACTORIALS_WORKERS", help="Fan-out of the threaded style.")
    ] = 2,
    pivot: Annotated[
        Optional[int], Option(min=0, help="Explicit split point for the threaded style.")
    ] = None,
    bits: Annotated[
        Optional[int], Option(min=2, help="Signed integer width the result must fit.")
    ] = None,
    prefixes: Annotated[
        bool, Option("--prefixes", help="Print every fact(i) for i <= n from the lazy sequence.")
    ] = False,
    compare_styles: Annotated[
        bool, Option("--compare", help="Compute with every style and show the results.")
    ] = False,
    log_level: Annotated[
        str, Option(envvar="FACTORIALS_LOG_LEVEL", help="Log level name.")
    ] = "WARNING",
) -> None:
    """Compute factorial of a given input."""

    console = Console()
    error_console = Console(stderr=True)
    config = FactorialConfig(
        style=style, workers=workers, pivot=pivot, bits=bits, log_level=log_level
    )

    try:
        configure_logging(config.log_level, console=error_console)
        if compare_styles:
            config.validate()
            if not print_comparison(console, n, config.bits):
                error_console.print("[red]styles disagree[/red]")
                raise Exit(code=1)
            return

        calculator = config.build_calculator()
        if prefixes:
            for i, value in enumerate(PrefixFactorials(n)):
                if config.bits is not None:
                    check_width(i, value, config.bits)
                console.print(f"fact({i}) = {value}", soft_wrap=True)
        else:
            console.print(f"fact({n}) = {calculator(n)}", soft_wrap=True)
    except (FactorialError, ValueError) as error:
        error_console.print(f"[red]error:[/red] {escape(str(error))}")
        raise Exit(code=1) from error
    except RecursionError as error:
        error_console.print(
            f"[red]error:[/red] the functional style cannot compute fact({n}), "
            "its recursion is deeper than the interpreter allows"
        )
        raise Exit(code=1) from error


# Allow the script to be run standalone (useful during development).
if __name__ == "__main__":
    app()
