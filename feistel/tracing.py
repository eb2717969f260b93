import logging
from typing import List, Optional, Sequence
from Interfaces import RoundObserver
from round_event import RoundEvent

logger = logging.getLogger("feistel.trace")


def format_block(block: Sequence[int]) -> str:
    """Печатаемые символы как есть (остальные точкой) и десятичные значения в скобках."""
    text = "".join(chr(b) if 32 <= b < 127 else "." for b in block)
    values = " ".join(str(b) for b in block)
    return f"{text} [{values}]"


class RecordingObserver(RoundObserver):
    def __init__(self):
        self.events: List[RoundEvent] = []

    def on_round(self, event: RoundEvent) -> None:
        self.events.append(event)


class LoggingObserver(RoundObserver):
    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.log = log if log is not None else logger
        self.level = level

    def on_round(self, event: RoundEvent) -> None:
        if not self.log.isEnabledFor(self.level):
            return
        self.log.log(self.level, "Round %d, key[%d] = %d", event.round_index + 1, event.key_index, event.key)
        self.log.log(self.level, "  L: %s", format_block(event.left))
        self.log.log(self.level, "  R: %s", format_block(event.right))
        for j, (l, f, r) in enumerate(zip(event.left, event.f_output, event.new_right)):
            self.log.log(self.level, "  [%d] %d ^ F(%d) = %d ^ %d = %d", j, l, event.right[j], l, f, r)
        self.log.log(self.level, "  new R: %s", format_block(event.new_right))
