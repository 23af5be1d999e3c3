"""
question-service entry point: the category gRPC server.
"""
import json
import logging
import signal
import sys
import threading
from concurrent import futures
from typing import Optional, Tuple

import grpc

from qservice.config import get_config
from qservice.container import ServiceContainer, build_container
from qservice.logging_setup import configure_logging

from .handler import CategoryServicer, build_generic_handler

logger = logging.getLogger(__name__)


def create_server(
    container: ServiceContainer,
    address: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> Tuple[grpc.Server, int]:
    """Build an unstarted server bound to ``address``; returns it with the bound port."""
    server_config = container.config.server
    address = address or server_config.grpc_address
    server = grpc.server(
        futures.ThreadPoolExecutor(max_workers=max_workers or server_config.grpc_max_workers)
    )
    server.add_generic_rpc_handlers((build_generic_handler(CategoryServicer(container)),))
    port = server.add_insecure_port(address)
    if not port:
        raise RuntimeError(f"Failed to bind gRPC server to {address}")
    return server, port


def serve(container: ServiceContainer) -> None:
    server, port = create_server(container)
    stop_requested = threading.Event()

    def _request_stop(signum, frame):
        logger.info("grpc_shutdown_requested: signal=%s", signal.Signals(signum).name)
        stop_requested.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    server.start()
    logger.info("grpc_server_started: host=%s port=%s", container.config.server.host, port)
    stop_requested.wait()

    grace = container.config.shutdown_timeout_ms / 1000
    if not server.stop(grace).wait(timeout=grace + 1):
        logger.warning("grpc_forced_shutdown: grace_seconds=%s", grace)
    container.close()
    logger.info("grpc_server_stopped")


def main() -> None:
    try:
        config = get_config()
    except ValueError as exc:
        logger.error("config_invalid: %s", exc)
        sys.exit(1)

    configure_logging(config.logging)
    if config.env == "development":
        logger.info("effective_config: %s", json.dumps(config.redacted()))

    container = build_container(config)
    serve(container)


if __name__ == "__main__":
    main()
