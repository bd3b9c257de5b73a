"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from sporthive.application.use_cases.users.create_user import create_user
from sporthive.domain.entities import PermissionLevel
from sporthive.domain.exceptions import DomainError
from sporthive.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the SportHive API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Display name of the user (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address used to sign in (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the user. Prompted interactively when omitted.",
    )
    parser.add_argument(
        "--permission",
        choices=[level.name.lower() for level in PermissionLevel],
        default="administrator",
        help="Permission tier of the user (default: administrator)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            permission=PermissionLevel[args.permission.upper()],
        )
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user in the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Permission: {user.permission.name.lower()}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
