import pytest

from pdbqtsplit.models import (
    Model,
    PdbqtParseError,
    default_prefix,
    parse_multimodel_lines,
    parse_multimodel_pdbqt,
    write_multimodel_pdbqt,
    write_pdbqt,
)

SAMPLE = [
    "MODEL 1",
    "REMARK VINA RESULT: -7.1",
    "ROOT",
    "ATOM      1  C   LIG A   1       0.000   0.000   0.000",
    "ENDROOT",
    "BEGIN_RES ARG A  10",
    "ROOT",
    "ATOM      2  CA  ARG A  10       1.000   1.000   1.000",
    "ENDROOT",
    "END_RES ARG A  10",
    "ENDMDL",
    "MODEL 2",
    "REMARK VINA RESULT: -6.5",
    "ENDMDL",
]


def test_default_prefix_strips_pdbqt_suffix():
    assert default_prefix("out.pdbqt", "_ligand_") == "out_ligand_"


def test_default_prefix_keeps_other_names():
    assert default_prefix("out.pdb", "_flex_") == "out.pdb_flex_"


def test_parse_splits_ligand_and_flex():
    models = parse_multimodel_lines(SAMPLE)
    assert len(models) == 2
    assert models[0].ligand == SAMPLE[1:5]
    assert models[0].flex == SAMPLE[5:10]
    assert models[1] == Model(ligand=["REMARK VINA RESULT: -6.5"], flex=[])


def test_parse_strips_single_newline():
    models = parse_multimodel_lines([line + "\n" for line in SAMPLE])
    assert models == parse_multimodel_lines(SAMPLE)


def test_parse_empty_input_gives_no_models():
    assert parse_multimodel_lines([]) == []


@pytest.mark.parametrize(
    "lines, message",
    [
        (["MODEL 1", "MODEL 2"], "Misplaced MODEL tag at line 2."),
        (["ENDMDL"], "Misplaced ENDMDL tag at line 1."),
        (["BEGIN_RES X"], "Misplaced BEGIN_RES tag at line 1."),
        (["MODEL 1", "END_RES X"], "Misplaced END_RES tag at line 2."),
        (["MODEL 1", "BEGIN_RES X", "ENDMDL"], "Misplaced ENDMDL tag at line 3."),
        (["MODEL 1", "BEGIN_RES X", "BEGIN_RES Y"], "Misplaced BEGIN_RES tag at line 3."),
        (["ATOM"], "Input occurs outside MODEL at line 1."),
        (["MODEL 1", "ATOM", "ATOM"], "Missing ENDMDL tag at line 4."),
    ],
)
def test_parse_errors(lines, message):
    with pytest.raises(PdbqtParseError) as info:
        parse_multimodel_lines(lines)
    assert str(info.value) == message


def test_parse_file(tmp_path):
    source = tmp_path / "in.pdbqt"
    source.write_text("\n".join(SAMPLE) + "\n")
    assert parse_multimodel_pdbqt(source) == parse_multimodel_lines(SAMPLE)


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_multimodel_pdbqt(tmp_path / "absent.pdbqt")


def test_write_pdbqt_writes_lines(tmp_path):
    target = tmp_path / "a.pdbqt"
    write_pdbqt(["one", "two"], target)
    assert target.read_text() == "one\ntwo\n"


def test_write_pdbqt_skips_empty(tmp_path):
    target = tmp_path / "a.pdbqt"
    write_pdbqt([], target)
    assert not target.exists()


def test_write_multimodel_round_trip(tmp_path):
    models = parse_multimodel_lines(SAMPLE)
    write_multimodel_pdbqt(models, str(tmp_path / "lig_"), str(tmp_path / "flex_"))
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["flex_1.pdbqt", "lig_1.pdbqt", "lig_2.pdbqt"]
    assert (tmp_path / "lig_1.pdbqt").read_text().splitlines() == models[0].ligand
    assert (tmp_path / "flex_1.pdbqt").read_text().splitlines() == models[0].flex
    assert (tmp_path / "lig_2.pdbqt").read_text().splitlines() == models[1].ligand


def test_write_multimodel_pads_numbers(tmp_path):
    models = [Model(ligand=[f"REMARK {k}"]) for k in range(10)]
    write_multimodel_pdbqt(models, str(tmp_path / "l"), str(tmp_path / "f"))
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names[0] == "l01.pdbqt"
    assert names[-1] == "l10.pdbqt"
    assert len(names) == 10
    assert (tmp_path / "l10.pdbqt").read_text() == "REMARK 9\n"