from dataclasses import dataclass


@dataclass(frozen=True)
class RoundEvent:
    """Снимок одного раунда: какие полублоки вошли и что получилось."""
    round_index: int
    key_index: int
    key: int
    left: bytes
    right: bytes
    f_output: bytes
    new_right: bytes
