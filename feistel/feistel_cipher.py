from typing import Optional, Sequence
from Interfaces import KeySchedule, RoundObserver, SymmetricBlockCipher
from Feistel_network import FeistelNetwork, Mode, process
from key_schedule import DEFAULT_ROUNDS, LinearKeySchedule, generate_keys


def encrypt(block: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> bytes:
    return process(block, generate_keys(rounds), Mode.FORWARD)


def decrypt(block: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> bytes:
    return process(block, generate_keys(rounds), Mode.INVERSE)


class FeistelCipher(SymmetricBlockCipher):
    def __init__(
        self,
        rounds: int = DEFAULT_ROUNDS,
        ks: Optional[KeySchedule] = None,
        observer: Optional[RoundObserver] = None,
    ):
        self.ks = ks if ks is not None else LinearKeySchedule()
        self._feistel = FeistelNetwork(observer=observer)
        self._rkeys = b""
        self.configure(rounds)

    def configure(self, rounds: int) -> None:
        self.rounds = rounds
        self._rkeys = self.ks.round_keys(rounds)

    def encrypt_block(self, block: Sequence[int]) -> bytes:
        return self._feistel.process(block, self._rkeys, Mode.FORWARD)

    def decrypt_block(self, block: Sequence[int]) -> bytes:
        return self._feistel.process(block, self._rkeys, Mode.INVERSE)
