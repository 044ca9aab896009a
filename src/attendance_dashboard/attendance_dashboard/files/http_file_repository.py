from __future__ import annotations

from typing import Any, Optional

from ..backend.connection import BackendConnection
from .repository import FileRepository


class HttpFileRepository(FileRepository):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def list_files(self, *, limit: Optional[int] = None, offset: Optional[int] = None) -> Any:
        return self._conn.get_json("/files/all/", {"limit": limit or None, "offset": offset or None})

    def get_file(self, file_id: int) -> Any:
        return self._conn.get_json(f"/files/file/{int(file_id)}/")

    def process_file(self, file_id: int) -> Any:
        return self._conn.get_json(f"/files/process/{int(file_id)}/")
