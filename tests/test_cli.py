"""Tests for the command-line interface, with the pool swapped for SQLite."""

import io
from decimal import Decimal

import pytest

from maven_reports import cli, db
from maven_reports.models import CategoryRisk
from maven_reports.reports import get_report
from maven_reports.runner import ReportResult


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / "empty.env"
    path.write_text("")
    return str(path)


@pytest.fixture
def no_pool(monkeypatch, pooled):
    """Skip opening a real pool; reports run on the SQLite fixture."""
    monkeypatch.setattr(db, "init_pool", lambda config: None)
    return pooled


def test_list_prints_every_report(capsys):
    cli.main(["list"])

    out = capsys.readouterr().out
    for name in ("store-managers", "inventory-risk", "customer-payments", "actor-awards"):
        assert name in out
    assert len(out.strip().splitlines()) == 8


def test_run_without_names_exits_1(env_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--env-file", env_file, "run"])
    assert exc.value.code == 1


def test_run_unknown_report_exits_1(env_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--env-file", env_file, "run", "no-such-report"])
    assert exc.value.code == 1


def test_print_result_renders_nulls():
    result = ReportResult(
        report=get_report("inventory-risk"),
        rows=[
            CategoryRisk(1, "Sports", 3, Decimal("21.99"), Decimal("65.97")),
            CategoryRisk(2, None, 1, None, None),
        ],
    )
    out = io.StringIO()

    cli.print_result(result, out=out)

    lines = out.getvalue().splitlines()
    assert lines[0].startswith("# inventory-risk:")
    assert lines[1] == "store_id\tcategory\tfilms\tavg_replacement_cost\ttotal_replacement_cost"
    assert lines[2] == "1\tSports\t3\t21.99\t65.97"
    assert lines[3] == "2\tNULL\t1\tNULL\tNULL"


def test_run_prints_report_rows(env_file, no_pool, insert, capsys):
    insert("advisor", advisor_id=1, first_name="Barry", last_name="Beck")

    cli.main(["--env-file", env_file, "run", "investors-advisors"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("# investors-advisors:")
    assert lines[1] == "type\tfirst_name\tlast_name\tcompany_name"
    assert lines[2] == "advisor\tBarry\tBeck\tNULL"


def test_run_exits_1_when_a_report_fails(env_file, no_pool, insert, capsys):
    """The healthy report still prints; the missing table fails the run."""
    insert("customer", customer_id=1, store_id=1, first_name="MARY", last_name="SMITH")
    no_pool.execute("DROP TABLE actor_award")

    with pytest.raises(SystemExit) as exc:
        cli.main(["--env-file", env_file, "run", "customers", "actor-awards"])

    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "# customers:" in out
    assert "MARY\tSMITH\t1\t1\tNULL\tNULL\tNULL" in out
    assert "# actor-awards:" not in out
