from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence

from round_event import RoundEvent


class KeySchedule(ABC):
    @abstractmethod
    def round_keys(self, rounds: int) -> bytes:
        ...


class RoundFunction(ABC):
    @abstractmethod
    def F(self, right_half: bytes, round_key: int) -> bytes:
        ...


class RoundObserver(ABC):
    @abstractmethod
    def on_round(self, event: RoundEvent) -> None:
        ...


class SymmetricBlockCipher(ABC):

    rounds: int

    @abstractmethod
    def configure(self, rounds: int) -> None:
        ...

    @abstractmethod
    def encrypt_block(self, block: Sequence[int]) -> bytes:
        ...

    @abstractmethod
    def decrypt_block(self, block: Sequence[int]) -> bytes:
        ...
