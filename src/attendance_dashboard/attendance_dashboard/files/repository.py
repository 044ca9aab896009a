from __future__ import annotations

from typing import Any, Optional, Protocol


class FileRepository(Protocol):
    def list_files(self, *, limit: Optional[int] = None, offset: Optional[int] = None) -> Any:
        raise NotImplementedError

    def get_file(self, file_id: int) -> Any:
        raise NotImplementedError

    def process_file(self, file_id: int) -> Any:
        raise NotImplementedError
