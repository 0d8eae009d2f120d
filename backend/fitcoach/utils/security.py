from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHashError

# Argon2 hasher for login PINs
pin_hasher = PasswordHasher(
    time_cost=2,
    memory_cost=102400,  # 100 MB
    parallelism=8,
    hash_len=32,
    salt_len=16,
)


def hash_pin(pin: str) -> str:
    return pin_hasher.hash(pin)


def verify_pin(plain_pin: str, hashed_pin: str) -> bool:
    try:
        return pin_hasher.verify(hashed_pin, plain_pin)
    except (VerifyMismatchError, InvalidHashError):
        return False
