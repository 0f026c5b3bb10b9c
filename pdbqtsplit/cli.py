"""Command line tool that splits a multi-model PDBQT file into per-model files."""

from __future__ import annotations

import argparse
import sys

from pdbqtsplit.models import (
    PdbqtParseError,
    default_prefix,
    parse_multimodel_pdbqt,
    write_multimodel_pdbqt,
)

_VERSION_STRING = "PDBQT Split 1.0"


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; errors raise instead of exiting."""
    parser = _Parser(prog="pdbqtsplit", add_help=False, allow_abbrev=False)
    inputs = parser.add_argument_group("Input")
    inputs.add_argument("--input", help="input to split (PDBQT)")
    outputs = parser.add_argument_group(
        "Output (optional) - defaults are chosen based on the input file name"
    )
    outputs.add_argument("--ligand", help="prefix for ligands")
    outputs.add_argument("--flex", help="prefix for side chains")
    info = parser.add_argument_group("Information (optional)")
    info.add_argument("--help", action="store_true", help="print this message")
    info.add_argument("--version", action="store_true", help="print program version")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the splitter and return the exit status."""
    parser = build_parser()
    usage = parser.format_help()
    print(_VERSION_STRING)

    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    except _UsageError as exc:
        sys.stderr.write(f"Command line parse error: {exc}\n\nCorrect usage:\n{usage}\n")
        return 1

    if args.help:
        print(usage)
        return 0
    if args.version:
        return 0
    if args.input is None:
        sys.stderr.write(f"Missing input.\n\nCorrect usage:\n{usage}\n")
        return 1

    ligand_prefix = args.ligand
    if ligand_prefix is None:
        ligand_prefix = default_prefix(args.input, "_ligand_")
        print(f"Prefix for ligands will be {ligand_prefix}")
    flex_prefix = args.flex
    if flex_prefix is None:
        flex_prefix = default_prefix(args.input, "_flex_")
        print(f"Prefix for flexible side chains will be {flex_prefix}")

    try:
        models = parse_multimodel_pdbqt(args.input)
    except PdbqtParseError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    except OSError:
        sys.stderr.write(f'\n\nError: could not open "{args.input}" for reading.\n')
        return 1

    try:
        write_multimodel_pdbqt(models, ligand_prefix, flex_prefix)
    except OSError as exc:
        name = exc.filename if exc.filename is not None else ligand_prefix
        sys.stderr.write(f'\n\nError: could not open "{name}" for writing.\n')
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())