from typing import Iterable
from Interfaces import KeySchedule

DEFAULT_ROUNDS = 4
KEY_STEP = 42

# Ключи "подробного" режима исходной демонстрации, совпадают с generate_keys(4)
VERBOSE_KEYS = bytes([42, 84, 126, 168])


def generate_keys(rounds: int) -> bytes:
    """Ключ раунда i (с единицы) равен (i * 42) mod 256."""
    return bytes((i * KEY_STEP) % 256 for i in range(1, rounds + 1))


class LinearKeySchedule(KeySchedule):
    def __init__(self, step: int = KEY_STEP):
        self.step = step

    def round_keys(self, rounds: int) -> bytes:
        return bytes((i * self.step) % 256 for i in range(1, rounds + 1))


class FixedKeySchedule(KeySchedule):
    """Заранее заданная последовательность ключей, без генерации."""
    def __init__(self, keys: Iterable[int]):
        self.keys = bytes(k % 256 for k in keys)

    def round_keys(self, rounds: int) -> bytes:
        if rounds != len(self.keys):
            raise ValueError(f"fixed schedule holds {len(self.keys)} keys, {rounds} rounds requested")
        return self.keys
