from __future__ import annotations

from PIL import Image

from weighted_range.cli import main


def test_cli_prints_both_reports(capsys):
    assert main(["1", "10", "7", "70", "3", "--seed", "3", "--times", "200"]) == 0
    out = capsys.readouterr().out
    exact, tally = out.rstrip("\n").split("\n\n")
    assert exact.split("\n")[0] == "1: 3.000"
    counts = [int(ln.split(": ")[1]) for ln in tally.split("\n")]
    assert len(counts) == 10
    assert sum(counts) == 200


def test_cli_seeded_output_is_reproducible(capsys):
    main(["1", "10", "7", "70", "3", "--seed", "42"])
    first = capsys.readouterr().out
    main(["1", "10", "7", "70", "3", "--seed", "42"])
    assert capsys.readouterr().out == first


def test_cli_invalid_configuration_exit_code(capsys):
    assert main(["5", "5", "5", "50", "1"]) == 2
    assert capsys.readouterr().out == ""


def test_cli_writes_histogram(tmp_path):
    target = tmp_path / "hist.png"
    assert main(["1", "10", "7", "70", "3", "--times", "50", "--histogram", str(target)]) == 0
    with Image.open(target) as im:
        assert im.format == "PNG"
