import secrets
import string
import time


_BASE36_ALPHABET = string.digits + string.ascii_uppercase
_RANDOM_SUFFIX_LENGTH = 9


def generate_qr_code(now_ms: int | None = None) -> str:
    """
    Build a ticket QR code: `QR` + millisecond timestamp + 9 random base-36 chars.

    Uniqueness is enforced by the ticket primary key, not here; callers retry
    on collision.
    """
    timestamp_ms = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    suffix = ''.join(secrets.choice(_BASE36_ALPHABET) for _ in range(_RANDOM_SUFFIX_LENGTH))
    return f'QR{timestamp_ms}{suffix}'.upper()
