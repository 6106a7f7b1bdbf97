import pytest

from ecommerce.infrastructure.security.password_hasher import PasswordHasher


def test_hash_and_verify():
    hasher = PasswordHasher(iterations=1000)

    password_hash, password_salt, algo, iterations = hasher.hash_password("supersecurepassword")

    assert password_hash != "supersecurepassword"
    assert algo == "pbkdf2_sha256"
    assert iterations == 1000
    kwargs = dict(password_hash=password_hash, password_salt=password_salt, iterations=iterations, algo=algo)
    assert hasher.verify_password("supersecurepassword", **kwargs)
    assert not hasher.verify_password("incorrect", **kwargs)


def test_salt_makes_hashes_differ():
    hasher = PasswordHasher(iterations=1000)

    first = hasher.hash_password("same-password")
    second = hasher.hash_password("same-password")

    assert first[0] != second[0]
    assert first[1] != second[1]


def test_verify_uses_stored_iterations():
    old = PasswordHasher(iterations=1000)
    password_hash, password_salt, algo, iterations = old.hash_password("rotating-password")

    assert PasswordHasher(iterations=2000).verify_password(
        "rotating-password",
        password_hash=password_hash,
        password_salt=password_salt,
        iterations=iterations,
        algo=algo,
    )


def test_unknown_algo_or_garbage_is_rejected():
    hasher = PasswordHasher(iterations=1000)
    password_hash, password_salt, _, iterations = hasher.hash_password("whatever-password")

    assert not hasher.verify_password(
        "whatever-password", password_hash=password_hash, password_salt=password_salt, iterations=iterations, algo="md5"
    )
    assert not hasher.verify_password(
        "whatever-password", password_hash="%%%", password_salt="***", iterations=iterations, algo="pbkdf2_sha256"
    )


def test_empty_password_is_refused():
    with pytest.raises(ValueError):
        PasswordHasher(iterations=1000).hash_password("")


def test_default_iterations():
    assert PasswordHasher().iterations == PasswordHasher.DEFAULT_ITERATIONS
