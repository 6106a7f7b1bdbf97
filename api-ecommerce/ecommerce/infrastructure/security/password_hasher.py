import base64
import binascii
import hashlib
import hmac
import os


class PasswordHasher:
    DEFAULT_ALGO = "pbkdf2_sha256"
    DEFAULT_ITERATIONS = 600_000
    SALT_BYTES = 16

    def __init__(self, iterations: int | None = None) -> None:
        self._iterations = iterations or self.DEFAULT_ITERATIONS

    @property
    def iterations(self) -> int:
        return self._iterations

    def hash_password(self, password: str) -> tuple[str, str, str, int]:
        """Return ``(hash, salt, algo, iterations)``, hash and salt base64-encoded."""
        if not password:
            raise ValueError("Password must not be empty")

        salt = os.urandom(self.SALT_BYTES)
        dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self._iterations)

        password_hash = base64.b64encode(dk).decode("utf-8")
        password_salt = base64.b64encode(salt).decode("utf-8")
        return (password_hash, password_salt, self.DEFAULT_ALGO, self._iterations)

    def verify_password(
        self,
        password: str,
        *,
        password_hash: str,
        password_salt: str,
        iterations: int,
        algo: str,
    ) -> bool:
        if algo != self.DEFAULT_ALGO or password is None:
            return False

        try:
            salt = base64.b64decode(password_salt.encode("utf-8"))
            expected = base64.b64decode(password_hash.encode("utf-8"))
        except (ValueError, binascii.Error):
            return False

        # stored iteration count, so raising DEFAULT_ITERATIONS keeps old hashes valid
        dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
        return hmac.compare_digest(dk, expected)

    def verify_user(self, password: str, user) -> bool:
        return self.verify_password(
            password,
            password_hash=user.password_hash,
            password_salt=user.password_salt,
            iterations=user.password_iterations,
            algo=user.password_algo,
        )

    def apply_to(self, user, password: str) -> None:
        password_hash, password_salt, algo, iterations = self.hash_password(password)
        user.password_hash = password_hash
        user.password_salt = password_salt
        user.password_algo = algo
        user.password_iterations = iterations
