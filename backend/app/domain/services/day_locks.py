"""
Verrous par journée.
Sérialise la régénération des rappels d'une même journée (et la complétion/suppression
de ses rappels) ; deux journées différentes ne partagent jamais de verrou.
"""
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator


class DayLockRegistry:
    """
    Un `threading.Lock` par clé (id de journée ou date), créé à la demande.
    Le registre ne garde que des références faibles : un verrou que plus personne
    ne tient ni n'attend disparaît du registre.
    """

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._locks)

    def lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        lock = self.lock_for(key)
        with lock:
            yield

    @staticmethod
    def day_key(day_id) -> str:
        return f"day:{day_id}"

    @staticmethod
    def date_key(day_date) -> str:
        return f"date:{day_date.isoformat()}"


day_locks = DayLockRegistry()
