"""
Fill the database with random demo employees, leaves and login accounts.
Run from the project root with .env loaded.

Usage:
  python scripts/seed_demo_data.py                       # 20 employees x 20 leaves, 10 users, 10 admins
  python scripts/seed_demo_data.py --employees 5 --leaves 3 --seed 42
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leavedesk.core.logging import setup_logging
from leavedesk.db.session import SessionLocal
from leavedesk.services.data_service import seed_demo_data


def main():
    parser = argparse.ArgumentParser(description="Generate demo data for LeaveDesk")
    parser.add_argument("--employees", type=int, default=20, help="Employees in the generated reporting chain")
    parser.add_argument("--leaves", type=int, default=20, help="Leaves per employee")
    parser.add_argument("--users", type=int, default=10, help="USER accounts (user1/password1, ...)")
    parser.add_argument("--admins", type=int, default=10, help="ADMIN accounts (admin1/adminpass1, ...)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = parser.parse_args()

    setup_logging()
    db = SessionLocal()
    try:
        summary = seed_demo_data(
            db,
            num_employees=args.employees,
            leaves_per_employee=args.leaves,
            num_users=args.users,
            num_admins=args.admins,
            seed=args.seed,
        )
        print(f"Created {summary['employees']} employees, {summary['leaves']} leaves, "
              f"{summary['users']} users, {summary['admins']} admins")
    finally:
        db.close()


if __name__ == "__main__":
    main()
