import base64
import threading
import time

from config import load_config
from core.errors import BatchLimitError
from internal.logging import get_logger
from ksuid import KSUID, KSUIDError, SeededRandomSource, SystemRandomSource
from utils.timestamp import format_datetime


class KSUIDGenerator:
    """Issues and inspects KSUIDs, keeping counters for stats and health."""

    def __init__(self, config=None, random_source=None, clock=None, audit=None):
        self.config = config or load_config().generator
        if random_source is None:
            if self.config.seed is not None:
                random_source = SeededRandomSource(self.config.seed)
            else:
                random_source = SystemRandomSource()
        self.random_source = random_source
        self.clock = clock or time.time
        self.audit = audit
        self._lock = threading.Lock()
        self._log = get_logger()
        self.started_at = time.time()
        self.issued = 0
        self.batches = 0
        self.parsed = 0
        self.rejected = 0
        if isinstance(random_source, SeededRandomSource):
            self._log.warn("generator seeded, ids are predictable", seed=random_source.seed)

    @property
    def seeded(self):
        return isinstance(self.random_source, SeededRandomSource)

    def generate(self, count=1):
        """Issue `count` ids sharing one clock reading, in ascending order."""
        if not 1 <= count <= self.config.max_batch:
            raise BatchLimitError(count, self.config.max_batch)
        now = self.clock()
        # The random source may be stateful (seeded), so draws are serialised
        with self._lock:
            ids = sorted(KSUID.generate(now, self.random_source) for _ in range(count))
            self.issued += count
            self.batches += 1
        if self.audit is not None:
            self.audit.try_log("issued", {"count": count, "first": str(ids[0]), "last": str(ids[-1])})
        self._log.debug("issued", count=count)
        return ids

    def inspect(self, text):
        try:
            ksuid = KSUID.parse(text)
        except KSUIDError as exc:
            self.rejected += 1
            self._log.info("rejected", kind=exc.kind, length=len(text))
            raise
        self.parsed += 1
        return ksuid

    def load(self, data):
        try:
            ksuid = KSUID.from_bytes(data)
        except KSUIDError as exc:
            self.rejected += 1
            self._log.info("rejected", kind=exc.kind, length=len(data))
            raise
        self.parsed += 1
        return ksuid

    def sort(self, ids):
        return sorted(ids)

    def get_stats(self):
        return {
            "issued": self.issued,
            "batches": self.batches,
            "parsed": self.parsed,
            "rejected": self.rejected,
            "max_batch": self.config.max_batch,
            "seeded": self.seeded,
            "uptime_s": round(time.time() - self.started_at, 1),
        }


def describe(ksuid):
    """Break a KSUID into its components for display."""
    raw = ksuid.bytes
    return {
        "id": ksuid,
        "hex": raw.hex(),
        "base64": base64.b64encode(raw).decode("ascii"),
        "raw_timestamp": ksuid.raw_timestamp,
        "unix": int(ksuid.timestamp.timestamp()),
        "timestamp": format_datetime(ksuid.timestamp),
        "payload": ksuid.payload.hex(),
    }
