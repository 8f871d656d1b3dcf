import threading
import time

CUSTOMER_PREFIX = "CUST"
POLICY_PREFIX = "POL"
CLAIM_PREFIX = "CLM"
BROKER_PREFIX = "BRK"
QUOTE_PREFIX = "QTE"


class RecordNumberGenerator:
    """Human-readable record numbers derived from wall-clock milliseconds.

    Numbers never repeat within a process: when two requests land in the same
    millisecond (or the clock steps back) the later one gets the previous
    value plus one. Uniqueness across processes is left to the database's
    UNIQUE constraints.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._lock = threading.Lock()
        self._last = 0

    def _next_millis(self) -> int:
        with self._lock:
            now = self._clock()
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now

    def next(self, prefix: str, digits: int = None) -> str:
        value = str(self._next_millis())
        if digits:
            value = value[-digits:]
        return f"{prefix}{value}"

    def customer_number(self) -> str:
        return self.next(CUSTOMER_PREFIX)

    def policy_number(self) -> str:
        return self.next(POLICY_PREFIX)

    def claim_number(self) -> str:
        return self.next(CLAIM_PREFIX)

    def broker_code(self) -> str:
        return self.next(BROKER_PREFIX, digits=6)

    def quote_id(self) -> str:
        return self.next(QUOTE_PREFIX)


record_numbers = RecordNumberGenerator()
