from __future__ import annotations
import argparse
import sys
import time
from typing import Optional, Sequence

from gaia_log.core.config import CONFIG
from gaia_log.core.log_service import LogService
from gaia_log.utils.logging_setup import setup_logging


log = setup_logging("main")


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --host, help lives on -?
    parser = argparse.ArgumentParser(prog="gaia-log-service", add_help=False,
                                     description="Collect log records published on Redis into local files.")
    parser.add_argument("-h", "--host", metavar="<address>", default=CONFIG.redis.host,
                        help="set the ip address of the Redis server to connect.")
    parser.add_argument("-p", "--port", metavar="<number>", type=int, default=CONFIG.redis.port,
                        help="set the port number of the Redis server to connect.")
    parser.add_argument("-d", "--directory", metavar="<path>", default=CONFIG.service.directory,
                        help="path of the directory to storage log files.")
    parser.add_argument("-?", "--help", action="help", help="show this help message and exit.")
    return parser


def launch(path: str = "./Logs", port: int = 6379, ip: str = "127.0.0.1") -> None:
    service = LogService(path, port, ip)
    log.info("Log file %s created.", service.recorder.log_name)
    service.start()
    log.info("Log service online. Redis server on %s:%s connected.", ip, port)
    while service.is_alive():
        service.join(timeout=3)
    if service.error is not None:
        raise service.error
    log.info("Log service stopped.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # Loop until the service exits normally
    while True:
        try:
            log.info("Launching log service...")
            launch(args.directory, args.port, args.host)
            return 0
        except KeyboardInterrupt:
            return 0
        except Exception:
            log.exception("Log service crashed. Restart in %s seconds.", CONFIG.service.restart_delay)
            time.sleep(CONFIG.service.restart_delay)


if __name__ == "__main__":
    sys.exit(main())
