from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class PunchDataFile:
    """Metadata of a punch-data export the backend stored in blob storage."""

    id: Optional[int]
    filename: str
    file_path: str
    blob_url: str
    from_date: str
    to_date: str
    total_records: Optional[int]
    unique_employees: Optional[int]
    created_at: str
    updated_at: str
    blob_name: Optional[str] = None
    container_name: Optional[str] = None

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "PunchDataFile":
        return cls(
            id=_to_int(item.get("id")),
            filename=item.get("filename") or "",
            file_path=item.get("file_path") or "",
            blob_url=item.get("blob_url") or "",
            from_date=item.get("from_date") or "",
            to_date=item.get("to_date") or "",
            total_records=item.get("total_records"),
            unique_employees=item.get("unique_employees"),
            created_at=item.get("created_at") or "",
            updated_at=item.get("updated_at") or "",
            blob_name=item.get("blob_name"),
            container_name=item.get("container_name"),
        )

    def as_row(self) -> dict:
        return asdict(self)
