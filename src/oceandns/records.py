"""Thread-safe tracking of provider-assigned record identifiers."""

import threading


class RecordIdMap:
    """Mapping of FQDN to the record ID the provider assigned on creation.

    Every read and write happens under a single lock, held only for the
    dictionary access itself. Callers must never hold it across network
    I/O, so this class exposes no way to do so.

    Setting an FQDN that is already tracked replaces its ID; the earlier
    remote record is then no longer reachable through this map.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._lock = threading.Lock()

    def set(self, fqdn: str, record_id: int) -> int | None:
        """Track record_id for fqdn, returning the ID it replaced, if any."""
        with self._lock:
            previous = self._ids.get(fqdn)
            self._ids[fqdn] = record_id
            return previous

    def get(self, fqdn: str) -> int | None:
        with self._lock:
            return self._ids.get(fqdn)

    def discard(self, fqdn: str) -> None:
        with self._lock:
            self._ids.pop(fqdn, None)

    def __contains__(self, fqdn: object) -> bool:
        with self._lock:
            return fqdn in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
