"""Example: drive the service layer directly, without Flask.

Controllers stay thin; the rules live in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.shift_roster.shift_roster.container import build_container


def main(code: str = "E100"):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    for group in container.auth_service.list_manager_groups():
        print(group.name, [slot.manager_id for slot in group.slots])

    resolution = container.employee_service.resolve_identity(code)
    print(code, "->", resolution.status.value)


if __name__ == "__main__":
    main(*sys.argv[1:2])
