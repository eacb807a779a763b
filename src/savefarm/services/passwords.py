"""Password hashing backed by passlib."""

from dataclasses import dataclass, field

from passlib.context import CryptContext


def _default_context() -> CryptContext:
    return CryptContext(schemes=["argon2"], deprecated="auto")


@dataclass
class PasswordHasher:
    """Salted argon2 password hashing."""

    context: CryptContext = field(default_factory=_default_context)

    def hash(self, password: str) -> str:
        """Return a salted digest for the password."""
        return self.context.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        """Return True when the password matches the stored digest."""
        try:
            return self.context.verify(password, digest)
        except (ValueError, TypeError):
            return False
