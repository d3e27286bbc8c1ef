from datetime import date

import pytest

from expense_tracker.interfaces.cli import main


def test_add_and_list(store, capsys):
    assert main(["add", "expense", "Lunch", "12.5", "--category", "Food", "--date", "2024-04-02"], store=store) == 0
    assert "Saved #1" in capsys.readouterr().out

    main(["list", "--month", "04"], store=store)
    out = capsys.readouterr().out
    assert "Lunch" in out
    assert "EXPENSE" in out


def test_add_rejects_negative_amount(store, capsys):
    assert main(["add", "expense", "Oops", "-5"], store=store) == 2
    assert len(store) == 0


def test_add_rejects_unknown_type(store):
    with pytest.raises(SystemExit):
        main(["add", "gift", "Present", "5"], store=store)


def test_delete(sample_store, capsys):
    tx_id = sample_store.all()[0].id
    main(["delete", str(tx_id)], store=sample_store)
    assert f"Deleted #{tx_id}" in capsys.readouterr().out

    main(["delete", str(tx_id)], store=sample_store)
    assert "No transaction" in capsys.readouterr().out


def test_summary_monthly_categories(sample_store, capsys):
    main(["summary"], store=sample_store)
    out = capsys.readouterr().out
    assert "Balance: 3500.00" in out

    main(["monthly"], store=sample_store)
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("2024-01")
    assert out[1].startswith("2024-02")

    main(["categories"], store=sample_store)
    assert "- Food: 1500.00" in capsys.readouterr().out


def test_list_empty(store, capsys):
    main(["list"], store=store)
    assert "No transactions found." in capsys.readouterr().out


def test_add_defaults_to_today(store):
    main(["add", "income", "Tips", "20"], store=store)
    assert store.all()[0].date == date.today().isoformat()


def test_write_failure_exits_with_error(read_only_store, capsys):
    assert main(["add", "expense", "Tea", "2"], store=read_only_store) == 1
    assert "Could not save transactions" in capsys.readouterr().out

    assert main(["delete", "1"], store=read_only_store) == 1
