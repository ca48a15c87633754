import secrets
from typing import Callable

# Uppercase letters and digits without look-alikes (0/O, 1/I/L) so codes read well over the phone
CODE_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"


def normalize_code(raw: str) -> str:
    """Canonical form of a user-typed order code: trimmed, no leading '#', uppercase."""
    return (raw or "").strip().lstrip("#").upper()


def random_code(length: int) -> str:
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))


def generate_unique_code(*, length: int, exists: Callable[[str], bool], max_attempts: int = 12) -> str:
    for _attempt in range(max_attempts):
        candidate = random_code(length)
        if not exists(candidate):
            return candidate
    raise RuntimeError(f"no free code of length {length} after {max_attempts} attempts")
