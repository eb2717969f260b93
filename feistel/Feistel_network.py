import enum
from typing import Optional, Sequence
from Interfaces import RoundFunction, RoundObserver
from round_event import RoundEvent


class MalformedInputError(ValueError):
    """Блок нечётной длины нельзя разделить на две равные половины."""


class Mode(enum.Enum):
    FORWARD = 0
    INVERSE = 1


def round_function(data: int, key: int) -> int:
    return (data + key) % 256


class AdditiveRound(RoundFunction):
    def F(self, right_half: bytes, round_key: int) -> bytes:
        return bytes(round_function(b, round_key) for b in right_half)


class FeistelNetwork:
    """
    Сеть Фейстеля без состояния: одна и та же процедура шифрует и расшифровывает,
    отличается только порядок выбора ключей раундов.
    Число раундов равно длине последовательности ключей.
    """
    def __init__(self, *, rf: Optional[RoundFunction] = None, observer: Optional[RoundObserver] = None):
        self.rf = rf if rf is not None else AdditiveRound()
        self.observer = observer

    def process(
        self,
        block: Sequence[int],
        keys: Sequence[int],
        mode: Mode = Mode.FORWARD,
        observer: Optional[RoundObserver] = None,
    ) -> bytes:
        if len(block) % 2 != 0:
            raise MalformedInputError("Block size must be even")
        if not isinstance(mode, Mode):
            raise TypeError(f"mode must be Mode, got {mode!r}")
        if observer is None:
            observer = self.observer

        half = len(block) // 2
        L = bytes(block[:half])
        R = bytes(block[half:])
        n = len(keys)
        for i in range(n):
            key_index = i if mode == Mode.FORWARD else n - 1 - i
            key = keys[key_index]
            Fout = self.rf.F(R, key)
            new_R = bytes(a ^ b for a, b in zip(L, Fout))
            if observer is not None:
                observer.on_round(RoundEvent(i, key_index, key, L, R, Fout, new_R))
            L, R = R, new_R
        # последний обмен уже сделан в цикле, поэтому R идёт первой
        return R + L


_default_network = FeistelNetwork()


def process(
    block: Sequence[int],
    keys: Sequence[int],
    mode: Mode = Mode.FORWARD,
    observer: Optional[RoundObserver] = None,
) -> bytes:
    return _default_network.process(block, keys, mode, observer)
