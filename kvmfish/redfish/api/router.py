from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from ...hardware.services.power import PowerControl
from ..services import resources
from ..services.actions import ActionDispatcher
from ..services.boot import BootOverrideStore
from ..services.resources import ROOT, ServiceIdentity

logger = logging.getLogger("redfish.api")


class BootPatch(BaseModel):
    BootSourceOverrideEnabled: Optional[str] = None
    BootSourceOverrideMode: Optional[str] = None
    BootSourceOverrideTarget: Optional[str] = None


class SystemPatchRequest(BaseModel):
    Boot: Optional[BootPatch] = None


class ResetRequest(BaseModel):
    ResetType: str


def get_router(
    ident: ServiceIdentity,
    power: PowerControl,
    boot: BootOverrideStore,
    dispatcher: ActionDispatcher,
) -> APIRouter:
    r = APIRouter(prefix=ROOT, tags=["redfish"])

    def _check(kind: str, given: str, expected: str) -> None:
        if given != expected:
            raise HTTPException(status_code=404, detail=f"{kind} {given} not found")

    @r.get("")
    @r.get("/", include_in_schema=False)
    def service_root():
        return resources.service_root(ident)

    @r.get("/Systems")
    def systems():
        return resources.systems_collection(ident)

    @r.get("/Systems/{system_id}")
    def system(system_id: str):
        _check("System", system_id, ident.system_id)
        state = power.get_power_state()
        return resources.computer_system(ident, state.value, boot.get())

    @r.patch("/Systems/{system_id}", status_code=204)
    def patch_system(system_id: str, body: SystemPatchRequest):
        _check("System", system_id, ident.system_id)
        if body.Boot is not None:
            boot.apply_patch(
                enabled=body.Boot.BootSourceOverrideEnabled,
                mode=body.Boot.BootSourceOverrideMode,
                target=body.Boot.BootSourceOverrideTarget,
            )
        return Response(status_code=204)

    @r.post("/Systems/{system_id}/Actions/ComputerSystem.Reset", status_code=204)
    def reset(system_id: str, body: ResetRequest):
        _check("System", system_id, ident.system_id)
        result = dispatcher.dispatch(body.ResetType)
        logger.debug("reset %s: observed=%s performed=%s", result.reset_type.value, result.observed, result.performed)
        return Response(status_code=204)

    @r.get("/Managers")
    def managers():
        return resources.managers_collection(ident)

    @r.get("/Managers/{manager_id}")
    def manager(manager_id: str):
        _check("Manager", manager_id, ident.manager_id)
        return resources.manager(ident)

    @r.get("/Chassis")
    def chassis_list():
        return resources.chassis_collection(ident)

    @r.get("/Chassis/{chassis_id}")
    def chassis(chassis_id: str):
        _check("Chassis", chassis_id, ident.chassis_id)
        return resources.chassis(ident)

    return r
