from __future__ import annotations
"""Redfish resource documents served by the API router."""

from dataclasses import dataclass
from typing import Any, Dict, List

from .actions import ALLOWED_RESET_TYPES
from .boot import BootOverrideConfig

ROOT = "/redfish/v1"
REDFISH_VERSION = "1.8.0"


@dataclass(frozen=True)
class ServiceIdentity:
    name: str = "NanoKVM"
    system_id: str = "System.1"
    manager_id: str = "BMC"
    chassis_id: str = "System"

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "ServiceIdentity":
        base = cls()
        return cls(
            name=str(cfg.get("name", base.name)),
            system_id=str(cfg.get("system_id", base.system_id)),
            manager_id=str(cfg.get("manager_id", base.manager_id)),
            chassis_id=str(cfg.get("chassis_id", base.chassis_id)),
        )


def _ref(path: str) -> Dict[str, str]:
    return {"@odata.id": path}


def _collection(odata_type: str, path: str, name: str, members: List[str]) -> Dict[str, Any]:
    return {
        "@odata.type": odata_type,
        "@odata.id": path,
        "Name": name,
        "Members": [_ref(m) for m in members],
        "Members@odata.count": len(members),
    }


def service_root(ident: ServiceIdentity) -> Dict[str, Any]:
    return {
        "@odata.type": "#ServiceRoot.v1_5_0.ServiceRoot",
        "@odata.id": ROOT,
        "Id": "RootService",
        "Name": f"{ident.name} Redfish Service",
        "RedfishVersion": REDFISH_VERSION,
        "Systems": _ref(f"{ROOT}/Systems"),
        "Managers": _ref(f"{ROOT}/Managers"),
        "Chassis": _ref(f"{ROOT}/Chassis"),
    }


def systems_collection(ident: ServiceIdentity) -> Dict[str, Any]:
    return _collection(
        "#ComputerSystemCollection.ComputerSystemCollection",
        f"{ROOT}/Systems",
        "Computer System Collection",
        [f"{ROOT}/Systems/{ident.system_id}"],
    )


def reset_target(ident: ServiceIdentity) -> str:
    return f"{ROOT}/Systems/{ident.system_id}/Actions/ComputerSystem.Reset"


def computer_system(ident: ServiceIdentity, power_state: str, boot: BootOverrideConfig) -> Dict[str, Any]:
    return {
        "@odata.type": "#ComputerSystem.v1_13_0.ComputerSystem",
        "@odata.id": f"{ROOT}/Systems/{ident.system_id}",
        "Id": ident.system_id,
        "Name": f"{ident.name} System",
        "PowerState": power_state,
        "Boot": boot.to_dict(),
        "Actions": {
            "#ComputerSystem.Reset": {
                "target": reset_target(ident),
                "ResetType@Redfish.AllowableValues": list(ALLOWED_RESET_TYPES),
            }
        },
    }


def managers_collection(ident: ServiceIdentity) -> Dict[str, Any]:
    return _collection(
        "#ManagerCollection.ManagerCollection",
        f"{ROOT}/Managers",
        "Manager Collection",
        [f"{ROOT}/Managers/{ident.manager_id}"],
    )


def manager(ident: ServiceIdentity) -> Dict[str, Any]:
    return {
        "@odata.type": "#Manager.v1_5_0.Manager",
        "@odata.id": f"{ROOT}/Managers/{ident.manager_id}",
        "Id": ident.manager_id,
        "Name": f"{ident.name} Manager",
        "ManagerType": "BMC",
        "Status": {"State": "Enabled", "Health": "OK"},
    }


def chassis_collection(ident: ServiceIdentity) -> Dict[str, Any]:
    return _collection(
        "#ChassisCollection.ChassisCollection",
        f"{ROOT}/Chassis",
        "Chassis Collection",
        [f"{ROOT}/Chassis/{ident.chassis_id}"],
    )


def chassis(ident: ServiceIdentity) -> Dict[str, Any]:
    return {
        "@odata.type": "#Chassis.v1_10_0.Chassis",
        "@odata.id": f"{ROOT}/Chassis/{ident.chassis_id}",
        "Id": ident.chassis_id,
        "Name": f"{ident.name} System Chassis",
        "ChassisType": "RackMount",
        "Status": {"State": "Enabled", "Health": "OK"},
    }
