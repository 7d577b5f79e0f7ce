from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import (
    CapabilityAbsent,
    InvalidActionName,
    InvalidBootTarget,
    KvmError,
    LineIOError,
    MalformedValue,
)
from ..hardware.xHardwareService import xHardwareService
from .api.router import get_router
from .config_loader import load_config
from .services.actions import ActionDispatcher
from .services.boot import BootOverrideStore
from .services.resources import ServiceIdentity

logger = logging.getLogger("redfish.service")

_STATUS = {
    InvalidActionName: 400,
    InvalidBootTarget: 400,
    CapabilityAbsent: 500,
    LineIOError: 500,
    MalformedValue: 500,
}


def _status_for(exc: KvmError) -> int:
    for kind, status in _STATUS.items():
        if isinstance(exc, kind):
            return status
    return 500


def _install_error_handler(app: FastAPI) -> None:
    @app.exception_handler(KvmError)
    async def _kvm_error(request: Request, exc: KvmError):
        status = _status_for(exc)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status,
            content={"error": {"code": "Base.1.0.GeneralError", "message": str(exc)}},
        )


def create_app(
    config_path: str | None = None,
    hardware: Optional[xHardwareService] = None,
    config_overrides: Optional[Dict[str, Any]] = None,
) -> FastAPI:
    """Build the Redfish app around one long-lived hardware service.

    Without ``hardware`` the board is detected here; detection errors
    propagate so the caller can refuse to start.
    """
    cfg = load_config(config_path, config_overrides)
    hw = hardware or xHardwareService()
    ident = ServiceIdentity.from_config(cfg.get("service", {}))
    boot = BootOverrideStore.from_config(cfg.get("boot", {}))
    dispatcher = ActionDispatcher(hw.power)

    app = FastAPI(title=f"{ident.name} Redfish Service")
    app.state.hardware = hw  # type: ignore[attr-defined]
    app.state.boot = boot  # type: ignore[attr-defined]
    app.state.dispatcher = dispatcher  # type: ignore[attr-defined]
    _install_error_handler(app)
    app.include_router(get_router(ident, hw.power, boot, dispatcher))

    include = cfg.get("include", {})
    if include.get("hardware"):
        from ..hardware.api.router import get_router as get_hardware_router
        app.include_router(get_hardware_router(hw))
    if include.get("logs"):
        from ..logwrapper import get_router as get_logs_router
        app.include_router(get_logs_router())
    return app


if __name__ == "__main__":
    import uvicorn
    from ..logwrapper import init_logging
    init_logging()
    cfg = load_config()
    uvicorn.run(create_app(), host=str(cfg["server"]["host"]), port=int(cfg["server"]["port"]))
