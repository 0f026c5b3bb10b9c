# pdbqtsplit

Split a multi-model PDBQT file, such as docking output, into one file per
model for the ligand and one file per model for the flexible side chains.

## Installation

```
pip install .
```

## Command line

```
pdbqtsplit --input out.pdbqt
```

The same tool can be started with `python -m pdbqtsplit.cli`.

This writes `out_ligand_1.pdbqt`, `out_ligand_2.pdbqt`, ... and, for models
that contain flexible residues (`BEGIN_RES` ... `END_RES` blocks),
`out_flex_1.pdbqt`, `out_flex_2.pdbqt`, .... Model numbers start at 1 and
are zero-padded to the width of the model count, so ten models give `01` to
`10`. A file is only written when its model has lines for it. The
`BEGIN_RES` and `END_RES` lines themselves go into the flex file; `MODEL`
and `ENDMDL` lines are not written.

Options (full names only; abbreviations are rejected):

- `--input FILE`: the PDBQT file to split (required)
- `--ligand PREFIX`: prefix for ligand files (default: input name without
  a trailing `.pdbqt`, followed by `_ligand_`)
- `--flex PREFIX`: prefix for side-chain files (default: input name without
  a trailing `.pdbqt`, followed by `_flex_`)
- `--help`: print the options
- `--version`: print the program version

Every run first prints the version line `PDBQT Split 1.0`. When a default
prefix is used, the chosen prefix is printed.

The exit status is 0 on success and 1 on a usage, file or parse error.
Parse errors name the line at fault, for example
`Misplaced ENDMDL tag at line 12.`

## Library use

```python
from pdbqtsplit.models import parse_multimodel_pdbqt, write_multimodel_pdbqt

models = parse_multimodel_pdbqt("out.pdbqt")
for model in models:
    print(len(model.ligand), len(model.flex))
write_multimodel_pdbqt(models, "pose_", "flex_")
```

- `parse_multimodel_lines(lines)` does the same parsing on any iterable of
  lines, removing one trailing newline from each. It returns a list of
  `Model` objects, each with `ligand` and `flex` lists of lines.
- `write_pdbqt(lines, name)` writes lines to one file, each followed by a
  newline; it creates nothing when there are no lines.
- `default_prefix(input_name, add)` builds the default output prefixes.
- Malformed input raises `PdbqtParseError`.

Files are read and written as UTF-8; bytes that are not valid UTF-8 are
passed through unchanged.

The package also provides `triangular_matrix_index(n, i, j)` and
`triangular_matrix_index_permissive(n, i, j)` in `pdbqtsplit.triangular`,
which map a pair of indices onto packed upper-triangular storage. The strict
form raises `ValueError` unless `i <= j < n`; the permissive form accepts
the pair in either order.

## Tests

```
pip install .[test]
pytest
```