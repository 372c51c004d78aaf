from pathlib import Path

from apps.cli import run, run_batch


def _wordfile(tmp_path: Path, words) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def test_run_solves_example(tmp_path: Path, capsys):
    wf = _wordfile(tmp_path, ["hello", "shirt", "skirt", "toolong"])
    code = run.main([wf, "shirt", "--target", "skirt", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == run.EXIT_SOLVED
    assert "Read 3 words of length 5" in out
    assert "Initial guess: shirt" in out
    assert "(1 candidates left)" in out
    assert "Solved 'skirt' in 2 guesses" in out


def test_run_reports_exhausted_dictionary(tmp_path: Path, capsys):
    wf = _wordfile(tmp_path, ["hello"])
    assert run.main([wf, "hello", "--target", "skirt"]) == run.EXIT_EXHAUSTED
    assert "Gave up after 1 guesses" in capsys.readouterr().out


def test_run_rejects_bad_input(tmp_path: Path):
    wf = _wordfile(tmp_path, ["hello", "skirt"])
    assert run.main([wf, "shirts", "--target", "skirt"]) == run.EXIT_ERROR
    assert run.main([str(tmp_path / "missing.txt"), "shirt"]) == run.EXIT_ERROR
    assert run.main([wf, "shirt", "--target", "sk1rt"]) == run.EXIT_ERROR
    assert run.main([wf, "shirt", "--target", "skirt", "--selector", "nope"]) == run.EXIT_ERROR


def test_run_batch_writes_reports(tmp_path: Path, capsys):
    wf = _wordfile(tmp_path, ["crane", "raise", "stare", "trace", "cared"])
    outdir = tmp_path / "reports"
    code = run_batch.main([wf, "crane", "--outdir", str(outdir), "--no-progress", "--seed", "5"])
    assert code == 0
    assert "Solved 5/5" in capsys.readouterr().out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1


def test_run_batch_fails_on_empty_wordlist(tmp_path: Path):
    wf = _wordfile(tmp_path, ["ox"])
    assert run_batch.main([wf, "crane", "--outdir", str(tmp_path)]) == 1
