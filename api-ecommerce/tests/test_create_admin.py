from ecommerce.entities.role import Role
from ecommerce.infrastructure.database.session import db_session
from ecommerce.repositories.user_repository import UserRepository
from ecommerce.scripts import create_admin

PASSWORD = "super-secret-password"


def test_creates_admin(monkeypatch, capsys):
    monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": PASSWORD)

    assert create_admin.main(["root@shop.io"]) == 0

    with db_session() as session:
        user = UserRepository(session).get_by_email("root@shop.io")
        assert user is not None
        assert user.role is Role.ADMIN
    assert "Created ADMIN user" in capsys.readouterr().out


def test_duplicate_email_fails(monkeypatch, capsys):
    monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": PASSWORD)
    create_admin.main(["root@shop.io"])

    assert create_admin.main(["root@shop.io"]) == 1
    assert "Email already existed" in capsys.readouterr().err


def test_mismatched_confirmation_fails(monkeypatch):
    answers = iter([PASSWORD, "something-different"])
    monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": next(answers))

    assert create_admin.main(["root@shop.io"]) == 1
