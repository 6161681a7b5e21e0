from . import messaging, migrations, tables, tables_db
from .base import Operation, Param, Service

SERVICES = (messaging.service, migrations.service, tables.service, tables_db.service)


def get_service(name: str) -> Service:
    for svc in SERVICES:
        if svc.name == name:
            return svc
    raise KeyError(f"unknown service: {name}")


def get_operation(service: str, command: str) -> Operation:
    return get_service(service)[command]


__all__ = ["SERVICES", "Operation", "Param", "Service", "get_operation", "get_service"]
