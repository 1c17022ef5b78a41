"""
Client-side state of the dashboard.

The store holds the six entity collections and the dashboard counters. It is
only ever replaced wholesale; subscribers (views) are called after every
replacement so they can re-render.
"""

from typing import Callable, Dict, Iterable, List, Mapping, Optional

from educms_types.envelopes import DashboardStats
from educms_types.tables import LogicalTable

Record = Dict
Subscriber = Callable[["ClientStore"], None]


class ClientStore:

    SOURCE_EMPTY = "empty"
    SOURCE_SERVER = "server"
    SOURCE_SAMPLE = "sample"

    def __init__(self):
        self._collections: Dict[LogicalTable, List[Record]] = {table: [] for table in LogicalTable}
        self._stats = DashboardStats()
        self._source = self.SOURCE_EMPTY
        self._subscribers: List[Subscriber] = []

    @property
    def stats(self) -> DashboardStats:
        return self._stats

    @property
    def source(self) -> str:
        """Where the current data came from: "empty", "server" or "sample"."""
        return self._source

    def collection(self, table: LogicalTable) -> List[Record]:
        return list(self._collections[LogicalTable(table)])

    @property
    def kelas(self) -> List[Record]:
        return self.collection(LogicalTable.KELAS)

    @property
    def pengguna(self) -> List[Record]:
        return self.collection(LogicalTable.PENGGUNA)

    @property
    def materi(self) -> List[Record]:
        return self.collection(LogicalTable.MATERI)

    @property
    def tugas(self) -> List[Record]:
        return self.collection(LogicalTable.TUGAS)

    @property
    def kuis(self) -> List[Record]:
        return self.collection(LogicalTable.KUIS)

    @property
    def forum(self) -> List[Record]:
        return self.collection(LogicalTable.FORUM)

    def replace(
        self,
        collections: Mapping[LogicalTable, Optional[Iterable[Record]]],
        stats: DashboardStats,
        source: str,
    ) -> None:
        """Replace every collection and the counters, then notify subscribers."""
        self._collections = {
            table: [dict(record) for record in (collections.get(table) or [])]
            for table in LogicalTable
        }
        self._stats = stats
        self._source = source

        for subscriber in list(self._subscribers):
            subscriber(self)

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a view; returns a callable that unregisters it."""
        self._subscribers.append(subscriber)

        def unsubscribe():
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe
