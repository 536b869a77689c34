import pytest

from scripts.clock import main, parse_category


def run(db_path, *argv):
    return main(["--db", str(db_path), *argv])


@pytest.mark.parametrize(
    "args,expected",
    [([], ""), (["work"], "work"), (["work", "extra"], "")],
    ids=["no_args", "one_arg", "multiple_args"],
)
def test_parse_category(args, expected):
    assert parse_category(args) == expected


def test_clock_in_and_out(db_path, capsys):
    assert run(db_path, "in", "work") == 0
    assert "Clocked in (work)" in capsys.readouterr().out

    assert run(db_path, "out") == 0
    assert "Clocked out (work)" in capsys.readouterr().out


def test_extra_arguments_use_default_category(db_path, capsys):
    assert run(db_path, "in", "work", "extra") == 0
    assert "Clocked in (default)" in capsys.readouterr().out


def test_default_in_then_named_out_fails(db_path, capsys):
    assert run(db_path, "in") == 0
    capsys.readouterr()
    assert run(db_path, "out", "work") == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: cannot clock out of a different category (default)")


def test_clock_out_twice_fails(db_path, capsys):
    assert run(db_path, "in", "work") == 0
    assert run(db_path, "out") == 0
    capsys.readouterr()
    assert run(db_path, "out") == 1
    assert "already clocked out (work @ " in capsys.readouterr().err


def test_log_lists_recent_records_oldest_first(db_path, capsys):
    for command in ["in", "out", "in", "out"]:
        assert run(db_path, command, "work") == 0
    capsys.readouterr()

    assert run(db_path, "log", "-n", "3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["ID", "Action", "Category", "Time"]
    assert [line.split()[:3] for line in lines[1:]] == [
        ["2:", "out", "work"],
        ["3:", "in", "work"],
        ["4:", "out", "work"],
    ]


def test_log_on_empty_database(db_path, capsys):
    assert run(db_path, "log") == 0
    assert capsys.readouterr().out.strip() == "ID Action Category Time"


def test_status(db_path, capsys):
    assert run(db_path, "status") == 1
    assert "Error: no records found" in capsys.readouterr().err

    assert run(db_path, "in", "work") == 0
    capsys.readouterr()
    assert run(db_path, "status") == 0
    assert capsys.readouterr().out.startswith("Clocked in (work) since ")


def test_elapsed(db_path, capsys):
    assert run(db_path, "in") == 0
    capsys.readouterr()
    assert run(db_path, "elapsed") == 1
    assert "not enough records" in capsys.readouterr().err

    assert run(db_path, "out") == 0
    capsys.readouterr()
    assert run(db_path, "elapsed") == 0
    assert capsys.readouterr().out.startswith("Last clock out was ")


def test_unusable_database_path(tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    assert run(blocker / "clock.db", "status") == 1
    assert capsys.readouterr().err.startswith("Error: ")
