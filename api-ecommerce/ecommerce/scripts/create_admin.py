"""Bootstrap an ADMIN account: ``python -m ecommerce.scripts.create_admin admin@example.com``."""
import argparse
import getpass
import sys

from ecommerce.api.dependencies import build_user_service
from ecommerce.api.schemas.user_schema import AdminCreateUserRequest
from ecommerce.config.logging_config import configure_logging
from ecommerce.entities.role import Role
from ecommerce.infrastructure.database.session import db_session, init_db

MIN_PASSWORD_LENGTH = 8


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an e-commerce ADMIN user")
    parser.add_argument("email", help="Unique email address for login")
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create missing tables before inserting the user",
    )
    return parser.parse_args(argv)


def prompt_for_password() -> tuple[str, str]:
    for _ in range(3):
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if len(password) < MIN_PASSWORD_LENGTH:
            print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.", file=sys.stderr)
            continue
        return password, confirm
    raise SystemExit("Failed to set password after three attempts.")


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = parse_args(argv)
    password, confirm = prompt_for_password()

    if args.init_db:
        init_db()

    request = AdminCreateUserRequest(
        email=args.email,
        new_password=password,
        confirm_password=confirm,
        role=Role.ADMIN.value,
    )
    with db_session() as session:
        result = build_user_service(session).admin_sign_up(request)
        if not result.is_ok:
            session.rollback()
            print(f"Error: {result.message}", file=sys.stderr)
            return 1

    print(f"Created ADMIN user <{request.email}>")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
