import argparse
import logging
import sys
from datetime import date

from expense_tracker.config import get_settings
from expense_tracker.domain.models import ALL, SUGGESTED_CATEGORIES, TRANSACTION_TYPES
from expense_tracker.services.ledger import TransactionStore, open_store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="expense-tracker", description="Track income and expenses")
    sub = parser.add_subparsers(dest="command", required=True)

    # -----------------------------
    # add
    # -----------------------------
    add = sub.add_parser("add", help="Record a new transaction")
    add.add_argument("type", choices=TRANSACTION_TYPES)
    add.add_argument("title")
    add.add_argument("amount", type=float)
    add.add_argument(
        "--category",
        default="Other",
        help=f"Free text; suggested: {', '.join(SUGGESTED_CATEGORIES)}",
    )
    add.add_argument("--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD (default: today)")
    add.add_argument("--payment-mode", default="Cash")

    delete = sub.add_parser("delete", help="Delete a transaction by id")
    delete.add_argument("id", type=int)

    # -----------------------------
    # list
    # -----------------------------
    ls = sub.add_parser("list", help="List transactions, newest first")
    ls.add_argument("--category", default=ALL)
    ls.add_argument("--year", default=ALL, help="4-digit year or 'all'")
    ls.add_argument("--month", default=ALL, help="2-digit month or 'all'")
    ls.add_argument("--title", default="", help="Case-insensitive title search")

    sub.add_parser("summary", help="Total income, expense and balance")
    sub.add_parser("monthly", help="Income and expense per month")
    sub.add_parser("categories", help="Expense total per category")
    return parser


def run(args: argparse.Namespace, store: TransactionStore) -> int:
    if args.command == "add":
        if args.amount < 0:
            print("❌ Amount must not be negative.")
            return 2
        tx = store.add(
            type=args.type,
            title=args.title,
            amount=args.amount,
            category=args.category,
            date=args.date or date.today(),
            payment_mode=args.payment_mode,
        )
        print(f"✅ Saved #{tx.id}: {tx.date} | {tx.type} | {tx.title} | {tx.amount:.2f}")

    elif args.command == "delete":
        if store.delete(args.id):
            print(f"🗑️ Deleted #{args.id}")
        else:
            print(f"No transaction with id {args.id}")

    elif args.command == "list":
        rows = store.query(category=args.category, year=args.year, month=args.month, title=args.title)
        if not rows:
            print("No transactions found.")
        for t in rows:
            print(f"#{t.id} | {t.date} | {t.title} | {t.category} | {t.type.upper()} | {t.amount:.2f} | {t.payment_mode}")

    elif args.command == "summary":
        s = store.summarize()
        print(f"Income:  {s.total_income:.2f}")
        print(f"Expense: {s.total_expense:.2f}")
        print(f"Balance: {s.balance:.2f}")

    elif args.command == "monthly":
        rows = store.group_by_month()
        if not rows:
            print("No data yet.")
        for m in rows:
            print(f"{m.month} | income {m.income:.2f} | expense {m.expense:.2f}")

    elif args.command == "categories":
        breakdown = store.category_breakdown()
        if not breakdown:
            print("No expenses yet.")
        for cat, total in breakdown.items():
            print(f"- {cat}: {total:.2f}")

    return 0


def main(argv=None, store: TransactionStore = None) -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    args = build_parser().parse_args(argv)
    store = store if store is not None else open_store(settings)

    try:
        return run(args, store)
    except OSError as e:
        print(f"❌ Could not save transactions: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
