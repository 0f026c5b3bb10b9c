"""Reading multi-model PDBQT files and writing each model to its own files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class PdbqtParseError(Exception):
    """Raised when a multi-model PDBQT document is malformed."""


@dataclass
class Model:
    """One docked model: ligand lines and flexible residue lines."""

    ligand: list[str] = field(default_factory=list)
    flex: list[str] = field(default_factory=list)


def default_prefix(input_name: str, add: str) -> str:
    """Derive an output prefix from the input name, dropping a ``.pdbqt`` suffix."""
    if input_name.endswith(".pdbqt"):
        input_name = input_name[: -len(".pdbqt")]
    return input_name + add


def parse_multimodel_lines(lines: Iterable[str]) -> list[Model]:
    """Split the lines of a multi-model PDBQT document into models.

    A single trailing newline is removed from each line.
    """
    models: list[Model] = []
    in_model = False
    in_ligand = True
    count = 0

    for count, line in enumerate(lines, start=1):
        if line.endswith("\n"):
            line = line[:-1]
        if line.startswith("MODEL"):
            if in_model or not in_ligand:
                raise PdbqtParseError(f"Misplaced MODEL tag at line {count}.")
            models.append(Model())
            in_model = True
        elif line.startswith("ENDMDL"):
            if not in_model or not in_ligand:
                raise PdbqtParseError(f"Misplaced ENDMDL tag at line {count}.")
            in_model = False
        elif line.startswith("BEGIN_RES"):
            if not in_model or not in_ligand:
                raise PdbqtParseError(f"Misplaced BEGIN_RES tag at line {count}.")
            in_ligand = False
            models[-1].flex.append(line)
        elif line.startswith("END_RES"):
            if not in_model or in_ligand:
                raise PdbqtParseError(f"Misplaced END_RES tag at line {count}.")
            in_ligand = True
            models[-1].flex.append(line)
        else:
            if not in_model:
                raise PdbqtParseError(f"Input occurs outside MODEL at line {count}.")
            target = models[-1].ligand if in_ligand else models[-1].flex
            target.append(line)

    if in_model:
        raise PdbqtParseError(f"Missing ENDMDL tag at line {count + 1}.")
    return models


def parse_multimodel_pdbqt(path: str | os.PathLike[str]) -> list[Model]:
    """Read and split a multi-model PDBQT file."""
    with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as stream:
        return parse_multimodel_lines(stream)


def write_pdbqt(lines: list[str], name: str | os.PathLike[str]) -> None:
    """Write lines to a file, one per line; nothing is created for no lines."""
    if not lines:
        return
    with open(name, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as out:
        for line in lines:
            out.write(line)
            out.write("\n")


def write_multimodel_pdbqt(models: list[Model], ligand_prefix: str, flex_prefix: str) -> None:
    """Write every model to numbered ligand and flex files.

    Numbers start at 1 and are zero-padded to the width of the model count.
    """
    width = len(str(len(models)))
    for counter, model in enumerate(models, start=1):
        suffix = f"{counter:0{width}d}.pdbqt"
        write_pdbqt(model.ligand, ligand_prefix + suffix)
        write_pdbqt(model.flex, flex_prefix + suffix)