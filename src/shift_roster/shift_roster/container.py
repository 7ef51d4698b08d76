from __future__ import annotations

from dataclasses import dataclass

from .credentials.service import AuthService
from .credentials.store_repository import StoreCredentialRepository
from .dashboards.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .database.record_store import MySQLRecordStore, RecordStore
from .employees.service import EmployeeService
from .employees.store_repository import StoreEmployeeRepository
from .shift_entries.service import ShiftEntryService
from .shift_entries.store_repository import StoreShiftEntryRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    employees_repo: StoreEmployeeRepository
    credentials_repo: StoreCredentialRepository
    entries_repo: StoreShiftEntryRepository

    auth_service: AuthService
    employee_service: EmployeeService
    shift_entry_service: ShiftEntryService
    dashboard_service: DashboardService


def build_container_from_store(store: RecordStore) -> Container:
    employees_repo = StoreEmployeeRepository(store)
    credentials_repo = StoreCredentialRepository(store)
    entries_repo = StoreShiftEntryRepository(store)

    return Container(
        store=store,
        employees_repo=employees_repo,
        credentials_repo=credentials_repo,
        entries_repo=entries_repo,
        auth_service=AuthService(credentials_repo),
        employee_service=EmployeeService(employees_repo),
        shift_entry_service=ShiftEntryService(entries_repo, employees_repo),
        dashboard_service=DashboardService(entries_repo, employees_repo),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)
    return build_container_from_store(MySQLRecordStore(conn))
