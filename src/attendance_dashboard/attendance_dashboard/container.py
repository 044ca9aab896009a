from __future__ import annotations

from dataclasses import dataclass

from .analytics.service import AnalyticsService
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService
from .backend.connection import BackendConfig, BackendConnection
from .core.constants import DEFAULT_BACKEND_TIMEOUT, DEFAULT_BACKEND_URL
from .files.http_file_repository import HttpFileRepository
from .files.service import FileService
from .mcid.http_mcid_repository import HttpMcidRepository
from .mcid.service import McidService


@dataclass(frozen=True)
class Container:
    conn: BackendConnection

    attendance_repo: HttpAttendanceRepository
    mcid_repo: HttpMcidRepository
    files_repo: HttpFileRepository

    attendance_service: AttendanceService
    mcid_service: McidService
    file_service: FileService
    analytics_service: AnalyticsService


def build_container(*, backend_config: dict) -> Container:
    config = BackendConfig(
        base_url=str(backend_config.get("url", DEFAULT_BACKEND_URL)),
        timeout=float(backend_config.get("timeout", DEFAULT_BACKEND_TIMEOUT)),
    )
    conn = BackendConnection.get_instance(config)

    attendance_repo = HttpAttendanceRepository(conn)
    mcid_repo = HttpMcidRepository(conn)
    files_repo = HttpFileRepository(conn)

    attendance_service = AttendanceService(attendance_repo)
    mcid_service = McidService(mcid_repo)
    file_service = FileService(files_repo)
    analytics_service = AnalyticsService(attendance_service)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        mcid_repo=mcid_repo,
        files_repo=files_repo,
        attendance_service=attendance_service,
        mcid_service=mcid_service,
        file_service=file_service,
        analytics_service=analytics_service,
    )
