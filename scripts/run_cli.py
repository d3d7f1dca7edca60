from __future__ import annotations

import sys
from importlib import import_module
from pathlib import Path

import click

project_root = Path(__file__).resolve().parents[1]
src_path = project_root / "src"
for entry in (src_path, project_root):
    candidate = str(entry)
    if candidate not in sys.path:
        sys.path.insert(0, candidate)

PACKAGE = "lib_variadic_args"


@click.command(help=f"Run {PACKAGE} CLI from a source checkout (passes additional args)")
@click.argument("args", nargs=-1)
def main(args: tuple[str, ...]) -> None:
    cli_main = import_module(f"{PACKAGE}.cli").main

    code = cli_main(list(args))
    raise SystemExit(int(code))


if __name__ == "__main__":
    main()
