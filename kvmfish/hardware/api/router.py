from __future__ import annotations
from fastapi import APIRouter, HTTPException

from ...errors import KvmError
from ..xHardwareService import xHardwareService


def get_router(hw: xHardwareService) -> APIRouter:
    r = APIRouter(prefix="/hardware", tags=["hardware"])

    @r.get("/healthz")
    def healthz():
        try:
            state = hw.power.get_power_state().value
            return {"ok": True, "version": hw.profile.variant.value, "power": state}
        except KvmError as e:
            return {"ok": False, "version": hw.profile.variant.value, "error": str(e)}

    @r.get("/profile")
    def profile():
        return hw.profile.to_dict()

    @r.get("/power")
    def power():
        try:
            return {"state": hw.power.get_power_state().value}
        except KvmError as e:
            raise HTTPException(status_code=500, detail=str(e))

    @r.get("/hdd")
    def hdd():
        if not hw.profile.has_hdd_led:
            raise HTTPException(status_code=404, detail="HDD LED not available for this hardware")
        try:
            return {"active": hw.power.read_hdd_activity()}
        except KvmError as e:
            raise HTTPException(status_code=500, detail=str(e))

    return r
