import pytest

from apps.cli import bench, opening, solve
from apps.cli.solve import interact, parse_history
from wordlesolver.config import SolverConfig
from wordlesolver.engine import evaluate
from wordlesolver.solvers import Solver


def _session(solver, lines):
    feed = iter(lines)
    out = []

    def read(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    solved = interact(solver, read=read, write=out.append)
    return solved, out


def test_interact_solves_a_game(tiny_words):
    solver = Solver(tiny_words, SolverConfig(opening_guess="route", seed=0))
    solved, out = _session(solver, ["?", evaluate("adieu", "route"), "22222", "quit"])
    assert solved == 1
    assert out[0].startswith("Guess: ROUTE")
    assert out[1] == "adieu route crane"
    assert out[2].startswith("Guess: ADIEU")
    assert out[3].startswith("Solved in 2: ADIEU")


def test_interact_reports_bad_input_and_continues(tiny_words):
    solver = Solver(tiny_words, SolverConfig(opening_guess="route", seed=0))
    solved, out = _session(solver, ["12", "!ab1de", "22220", "!CRANE", "reset"])
    assert solved == 0
    assert "invalid feedback" in out[1]
    assert "invalid word" in out[2]
    assert "Check the feedback (turn 1: route = 22220)" in out[3]
    assert out[4].startswith("Guess: CRANE")
    assert out[5].startswith("Guess: ROUTE")
    assert solver.guess_count == 0


def test_interact_notes_words_outside_lists(tiny_words):
    solver = Solver(tiny_words, SolverConfig(opening_guess="route", seed=0))
    _, out = _session(solver, ["!zzzzz"])
    assert out[1] == "note: zzzzz is not in the word lists"


def test_interact_override_tolerates_spacing(tiny_words):
    solver = Solver(tiny_words, SolverConfig(opening_guess="route", seed=0))
    _, out = _session(solver, ["  ! Crane  "])
    assert out[1].startswith("Guess: CRANE")
    assert solver.current_guess == "crane"


def test_parse_history():
    assert parse_history(["soare=00102", " crane = 22222"]) == [("soare", "00102"), ("crane", "22222")]
    with pytest.raises(ValueError):
        parse_history(["soare"])


@pytest.fixture
def list_files(tmp_path):
    ans = tmp_path / "answers.txt"
    gue = tmp_path / "guesses.txt"
    ans.write_text("adieu\nroute\ncrane\n", encoding="utf-8")
    gue.write_text("nymph\nfjord\n", encoding="utf-8")
    return ["--answers", str(ans), "--guesses", str(gue)]


def test_solve_main_history(list_files, capsys):
    rc = solve.main(list_files + ["--opening", "route", "--seed", "0",
                                  "--history", f"route={evaluate('crane', 'route')}"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "crane"


def test_solve_main_bad_history(list_files, capsys):
    rc = solve.main(list_files + ["--opening", "route", "--history", "route=9"])
    assert rc == 1
    assert "error" in capsys.readouterr().err


def test_solve_main_missing_lists(tmp_path):
    with pytest.raises(SystemExit):
        solve.main(["--answers", str(tmp_path / "none.txt"), "--guesses", str(tmp_path / "no.txt"),
                    "--history", "route=00000"])


def test_bench_main_writes_outputs(list_files, tmp_path, capsys):
    outdir = tmp_path / "reports"
    rc = bench.main(list_files + ["--strategies", "ALL", "--opening", "derive",
                                  "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    for sid in ("entropy", "expected_left"):
        assert len(list((outdir / sid).glob("run_*Z.csv"))) == 1
        assert len(list((outdir / sid).glob("run_*_turns.csv"))) == 1
        assert len(list((outdir / sid).glob("run_*_manifest.json"))) == 1
    assert "expected_left: solved 3/3" in capsys.readouterr().out


def test_bench_rejects_unknown_strategy(list_files, tmp_path):
    with pytest.raises(SystemExit):
        bench.main(list_files + ["--strategies", "nope", "--outdir", str(tmp_path), "--progress", "off"])


def test_opening_main(list_files, capsys):
    assert opening.main(list_files + ["--top", "3"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].lstrip().startswith("1.")
    assert opening.main(list_files + ["--verify", "nymph"]) == 1
