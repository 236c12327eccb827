"""
Process-level lifecycle: open the store connection, then the listener; on the
way down close the listener first, then the store connection.

``run_server`` hands back a ``ServerHandle`` that ``close_server`` consumes,
so nothing about the running server lives in module globals.
"""

import logging
import threading
import time
from typing import Optional

import uvicorn

from api import config
from api.main import create_app
from dbase.driver import DbaseDriver

logger = logging.getLogger(__name__)

STARTUP_POLL_SECONDS = 0.05


class ServerHandle:
    def __init__(self, server: uvicorn.Server, thread: threading.Thread, driver: DbaseDriver):
        self.server = server
        self.thread = thread
        self.driver = driver

    @property
    def port(self) -> int:
        # the bound port, which differs from the configured one when it was 0
        for listener in self.server.servers:
            for sock in listener.sockets:
                return sock.getsockname()[1]
        return self.server.config.port


def run_server(
    database_url: Optional[str] = None,
    port: Optional[int] = None,
    driver: Optional[DbaseDriver] = None,
    host: Optional[str] = None,
) -> ServerHandle:
    driver = driver or DbaseDriver(database_url or config.DATABASE_URL)
    driver.connect()

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(driver),
            host=host or config.HOST,
            port=config.PORT if port is None else port,
            log_config=None,
        )
    )
    thread = threading.Thread(target=server.run, name="blog-api-server", daemon=True)
    thread.start()

    while not server.started and thread.is_alive():
        time.sleep(STARTUP_POLL_SECONDS)

    if not server.started:
        driver.close()
        raise RuntimeError(f"Failed to start server on port {server.config.port}")

    handle = ServerHandle(server, thread, driver)
    logger.info("Your app is listening on port %s", handle.port)
    return handle


def close_server(handle: ServerHandle) -> None:
    logger.info("Closing server")
    handle.server.should_exit = True
    handle.thread.join()
    handle.driver.close()


def main() -> None:
    uvicorn.run("api.main:app", host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
