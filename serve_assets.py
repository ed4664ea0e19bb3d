"""
Scan a figure directory, print its top-level assets and serve it on loopback.

    python serve_assets.py path/to/game/figure --port 8899
"""

import argparse
import logging
import sys
import time
from urllib.parse import quote

from figurekit.core.config.settings import settings
from figurekit.features.asset_scanner.service.api import scan_assets
from figurekit.features.file_server.domain.models import BindFailedError, NoPortAvailableError
from figurekit.features.file_server.service.api import start_server, stop_server

logger = logging.getLogger("figurekit")


def main() -> int:
    ap = argparse.ArgumentParser(description="List discoverable figure assets and serve them over HTTP")
    ap.add_argument("root", help="Directory to scan and serve")
    ap.add_argument("--port", type=int, default=settings.SERVER_DEFAULT_PORT, help="First port to try")
    ap.add_argument("--port-range", type=int, default=settings.SERVER_PORT_RANGE, help="How many ports to try")
    ap.add_argument("--scan-only", action="store_true", help="Print the asset list and exit")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        assets = scan_assets(args.root)
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.error(str(e))
        return 1

    if args.scan_only:
        for asset in assets:
            print(asset)
        return 0

    try:
        url = start_server(args.root, start_port=args.port, port_range=args.port_range)
    except (NoPortAvailableError, BindFailedError) as e:
        logger.error(str(e))
        return 2

    for asset in assets:
        print(f"{url}/{quote(asset)}")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        stop_server()

    return 0


if __name__ == "__main__":
    sys.exit(main())
