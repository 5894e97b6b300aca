"""Id generation for workouts and exercises."""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def new_id(prefix: str, taken: set[str] | None = None) -> str:
    """Generate an id such as ``ex_k3j9x0qa_lq2w8f1c`` not present in taken."""
    taken = taken or set()
    while True:
        random_part = "".join(secrets.choice(_ALPHABET) for _ in range(8))
        candidate = f"{prefix}_{random_part}_{_base36(int(time.time() * 1000))}"
        if candidate not in taken:
            return candidate
