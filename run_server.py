from __future__ import annotations
"""
kvmfish launcher
- central logging
- one-time hardware detection (fatal on failure)
- Redfish app served by uvicorn
"""
import logging
import os
import sys

import uvicorn  # type: ignore

# Put the project root on sys.path when run as a plain script
ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def main() -> None:
    from kvmfish.errors import HardwareDetectionError
    from kvmfish.logwrapper import init_logging
    from kvmfish.redfish.config_loader import load_config
    from kvmfish.redfish.xRedfishService import create_app

    init_logging()
    log = logging.getLogger("kvmfish")

    cfg = load_config()
    try:
        app = create_app()
    except HardwareDetectionError as exc:
        log.critical("Failed to detect hardware: %s", exc)
        sys.exit(1)

    host = str(cfg["server"]["host"])
    port = int(cfg["server"]["port"])
    log.info("Starting Redfish API server on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
