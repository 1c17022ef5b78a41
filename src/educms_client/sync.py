"""
Data synchronisation between the dashboard and the EduCMS API.

``DataSync.load_all`` fetches every collection and the dashboard counters as
one batch. The batch is all or nothing: every request is awaited, then the
first failure (in request order) aborts the load and the store is filled with
the local sample dataset instead.

Mutations (``save_*`` and ``delete_*``) notify, close the editor and reload
everything on success; on failure they notify and re-raise.
"""

import asyncio
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Union
import logging

from educms_client.base import Attachment, Identifier
from educms_client.client import EduCMSClient
from educms_client.exceptions import DataLoadError, EduCMSClientError
from educms_client.notifications import LoggingNotifier, NotificationLevel, Notifier
from educms_client.sample_data import sample_collections, sample_stats
from educms_client.store import ClientStore
from educms_types.entities import (
    EntityForm,
    ForumForm,
    KelasForm,
    KuisForm,
    MateriForm,
    PenggunaForm,
    TugasForm,
)
from educms_types.tables import LogicalTable

logger = logging.getLogger(__name__)

ENTITY_LABELS = {
    LogicalTable.KELAS: "Class",
    LogicalTable.PENGGUNA: "User",
    LogicalTable.MATERI: "Material",
    LogicalTable.TUGAS: "Assignment",
    LogicalTable.KUIS: "Quiz",
    LogicalTable.FORUM: "Discussion",
}


async def gather_all_or_nothing(awaitables: Iterable[Awaitable[Any]]) -> List[Any]:
    """
    Await every awaitable concurrently, then raise the first failure.

    Unlike ``asyncio.gather`` without ``return_exceptions``, no request is
    left running when another one fails.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


class DataSync:
    """
    Keeps a ClientStore in sync with the server.

    Args:
        client: API client
        store: Store to fill; a new one when None
        notifier: UI hooks; notifications are logged when None
    """

    def __init__(
        self,
        client: EduCMSClient,
        store: Optional[ClientStore] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.client = client
        self.store = store if store is not None else ClientStore()
        self.notifier = notifier if notifier is not None else LoggingNotifier()

    # Loading

    async def fetch_all(self):
        """
        Fetch the six collections and the counters.

        Raises:
            DataLoadError: If any request of the batch failed or returned an
                unexpected payload
        """
        tables = list(LogicalTable)
        try:
            *collections, stats = await gather_all_or_nothing(
                [self.client.table(table).list() for table in tables] + [self.client.dashboard_stats()]
            )
        except EduCMSClientError as e:
            if e.status_code is not None:
                raise DataLoadError(status_code=e.status_code) from e
            raise DataLoadError(f"Failed to load data from server: {e.message}") from e
        except (ValueError, TypeError) as e:
            # Includes pydantic validation of the counters
            raise DataLoadError(f"Failed to load data from server: invalid response ({e})") from e

        for table, rows in zip(tables, collections):
            if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
                raise DataLoadError(f"Failed to load data from server: invalid {table.value} collection")

        return dict(zip(tables, collections)), stats

    async def load_all(self) -> bool:
        """
        Replace the store with fresh server data.

        Returns:
            True when server data was loaded, False when the sample dataset
            was used instead
        """
        self.notifier.set_loading(True)
        try:
            collections, stats = await self.fetch_all()
        except DataLoadError as e:
            logger.error(f"Error loading data: {e}")
            self.notifier.notify(f"Failed to load data: {e.message}", NotificationLevel.DANGER)
            self.store.replace(sample_collections(), sample_stats(), ClientStore.SOURCE_SAMPLE)
            return False
        finally:
            self.notifier.set_loading(False)

        self.store.replace(collections, stats, ClientStore.SOURCE_SERVER)
        self.notifier.notify("Data loaded successfully!", NotificationLevel.SUCCESS)
        return True

    # Mutations

    async def save(
        self,
        form: EntityForm,
        attachment: Optional[Attachment] = None,
        *,
        is_edit: bool = False,
    ) -> Dict[str, Any]:
        """
        Create or update one record.

        Multipart entities send their fields as form parts plus the optional
        attachment; the others send JSON. An edit without an ``id`` creates.

        Returns:
            The response envelope
        """
        table = form.table
        label = ENTITY_LABELS[table]
        endpoint = self.client.table(table)
        update = is_edit and form.id is not None

        if form.is_multipart:
            if isinstance(form, PenggunaForm):
                fields = form.form_fields_for(is_edit)
            else:
                fields = form.form_fields()
            attachments = {form.attachment_field: attachment} if attachment is not None else None
            body: Dict[str, Any] = {"fields": fields, "attachments": attachments}
        else:
            body = {"json_data": form.json_body()}

        self.notifier.set_loading(True)
        try:
            if update:
                result = await endpoint.update(form.id, **body)
            else:
                result = await endpoint.create(**body)
        except EduCMSClientError as e:
            logger.error(f"Error saving {table.value}: {e}")
            self.notifier.notify(f"Failed to save {label.lower()}: {e.message}", NotificationLevel.DANGER)
            raise
        finally:
            self.notifier.set_loading(False)

        action = "updated" if update else "saved"
        self.notifier.notify(f"{label} {action} successfully!", NotificationLevel.SUCCESS)
        self.notifier.close_editor(table)
        await self.load_all()
        return result

    async def delete(self, table: Union[str, LogicalTable], id: Identifier) -> Dict[str, Any]:
        table = LogicalTable(table)
        label = ENTITY_LABELS[table]

        self.notifier.set_loading(True)
        try:
            result = await self.client.table(table).delete(id)
        except EduCMSClientError as e:
            logger.error(f"Error deleting {table.value} {id}: {e}")
            self.notifier.notify(f"Failed to delete {label.lower()}: {e.message}", NotificationLevel.DANGER)
            raise
        finally:
            self.notifier.set_loading(False)

        self.notifier.notify(f"{label} deleted successfully!", NotificationLevel.SUCCESS)
        await self.load_all()
        return result

    async def save_kelas(self, form: KelasForm, image: Optional[Attachment] = None, *, is_edit: bool = False):
        return await self.save(form, image, is_edit=is_edit)

    async def save_pengguna(self, form: PenggunaForm, photo: Optional[Attachment] = None, *, is_edit: bool = False):
        return await self.save(form, photo, is_edit=is_edit)

    async def save_materi(self, form: MateriForm, file: Optional[Attachment] = None, *, is_edit: bool = False):
        return await self.save(form, file, is_edit=is_edit)

    async def save_tugas(self, form: TugasForm, file: Optional[Attachment] = None, *, is_edit: bool = False):
        return await self.save(form, file, is_edit=is_edit)

    async def save_kuis(self, form: KuisForm, *, is_edit: bool = False):
        return await self.save(form, is_edit=is_edit)

    async def save_forum(self, form: ForumForm, *, is_edit: bool = False):
        return await self.save(form, is_edit=is_edit)

    async def delete_kelas(self, id: Identifier):
        return await self.delete(LogicalTable.KELAS, id)

    async def delete_pengguna(self, id: Identifier):
        return await self.delete(LogicalTable.PENGGUNA, id)

    async def delete_materi(self, id: Identifier):
        return await self.delete(LogicalTable.MATERI, id)

    async def delete_tugas(self, id: Identifier):
        return await self.delete(LogicalTable.TUGAS, id)

    async def delete_kuis(self, id: Identifier):
        return await self.delete(LogicalTable.KUIS, id)

    async def delete_forum(self, id: Identifier):
        return await self.delete(LogicalTable.FORUM, id)

    async def delete_item(self, kind: str, id: Identifier) -> bool:
        """
        Delete by entity kind, as triggered from a list view.

        Failures were already notified by ``delete`` and are not re-raised.
        Unknown kinds only produce a warning notification.
        """
        try:
            table = LogicalTable(kind)
        except ValueError:
            self.notifier.notify(f"Delete is not supported for {kind}", NotificationLevel.WARNING)
            return False

        try:
            await self.delete(table, id)
        except EduCMSClientError:
            return False
        return True
