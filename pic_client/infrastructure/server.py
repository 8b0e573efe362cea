"""Lifecycle management for the PocketIC server process."""

import asyncio
import itertools
import logging
import os
import time
from pathlib import Path
from typing import List, Optional

from ..config.server_config import StartServerOptions, load_server_config
from ..models.base_types import ServerState
from ..monitoring.metrics import SERVER_READY_LATENCY, SERVER_STARTS
from ..utils.errors import (
    BinNotFoundError,
    BinTimeoutError,
    PicError,
    ServerNotReadyError,
    ServerStopError,
    classify_start_error,
)
from .polling import poll

logger = logging.getLogger(__name__)

SERVER_HOST = '127.0.0.1'
MAX_PORT = 65535

# distinguishes servers started from the same process
_server_ids = itertools.count()


def parse_port(text: str) -> int:
    """Parse the content of a readiness file into a TCP port."""
    port = int(text.strip())
    if not 0 < port <= MAX_PORT:
        raise ValueError(f"Port out of range: {port}")
    return port


class PocketIcServer:
    """Owns a PocketIC server process from launch to shutdown.

    The server is launched with ``--port-file <path>`` and writes the port it
    listens on to that file once it is ready to accept requests. Until then
    the file is polled at a fixed interval, bounded by a timeout.

    Usage::

        server = await PocketIcServer.create()
        pic = await PocketIcClient.create(server.get_url())
        ...
        await pic.tear_down()
        await server.stop()
    """

    def __init__(self, options: Optional[StartServerOptions] = None):
        self.options = options or load_server_config()
        self.state = ServerState.NOT_STARTED
        self.port: Optional[int] = None
        self._url: Optional[str] = None
        self._process: Optional[asyncio.subprocess.Process] = None
        self._port_file_path: Optional[Path] = None

    @classmethod
    async def create(cls, options: Optional[StartServerOptions] = None) -> 'PocketIcServer':
        """Start a new server and return it once it is ready."""
        server = cls(options)
        await server.start()
        return server

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process else None

    @property
    def port_file_path(self) -> Path:
        if self._port_file_path is None:
            name = f"pocket_ic_{os.getppid()}_{os.getpid()}_{next(_server_ids)}.port"
            self._port_file_path = Path(self.options.port_file_dir) / name
        return self._port_file_path

    def get_url(self) -> str:
        """Base URL of the running server."""
        if self.state != ServerState.READY:
            raise ServerNotReadyError(self.state.value)
        return self._url

    async def start(self) -> 'PocketIcServer':
        """Launch the binary and wait until it reports its port."""
        if self.state != ServerState.NOT_STARTED:
            raise RuntimeError(f"Cannot start a PocketIC server in state {self.state.value}")

        self.state = ServerState.STARTING
        started_at = time.monotonic()
        try:
            bin_path = self._assert_bin_exists()
            self._process = await self._spawn(bin_path)
            self.port = await poll(
                self._read_port,
                interval_ms=self.options.poll_interval_ms,
                timeout_ms=self.options.poll_timeout_ms,
                retry_on=(OSError, ValueError),
                timeout_error=BinTimeoutError(self.options.poll_timeout_ms),
            )
        except PicError as e:
            logger.error(f"PocketIC server failed to start: {e.message}")
            await self._fail(e.code)
            raise
        except asyncio.CancelledError:
            logger.warning("PocketIC server start was cancelled")
            await self._fail('Cancelled')
            raise

        self._url = f"http://{SERVER_HOST}:{self.port}"
        self.state = ServerState.READY
        SERVER_STARTS.labels(outcome='ready').inc()
        SERVER_READY_LATENCY.observe(time.monotonic() - started_at)
        logger.info(f"PocketIC server ready at {self._url} (pid {self.pid})")
        return self

    async def stop(self) -> None:
        """Terminate the server and wait for the process to exit.

        Stopping a server that is not running is a no-op.
        """
        if self.state != ServerState.READY:
            logger.debug(f"Ignoring stop for PocketIC server in state {self.state.value}")
            return

        logger.info(f"Stopping PocketIC server (pid {self.pid})")
        try:
            await self._terminate()
        except OSError as e:
            logger.error(f"Failed to stop PocketIC server: {str(e)}")
            raise ServerStopError(e) from e

        self.state = ServerState.STOPPED
        logger.info("PocketIC server stopped")

    def _assert_bin_exists(self) -> Path:
        bin_path = self.options.resolve_bin_path()
        if not bin_path.is_file():
            raise BinNotFoundError(str(bin_path))

        try:
            os.chmod(bin_path, 0o700)
        except OSError as e:
            # spawning reports the real problem if the binary is not executable
            logger.warning(f"Could not make {bin_path} executable: {str(e)}")
        return bin_path

    def _build_args(self, bin_path: Path) -> List[str]:
        args = [str(bin_path), '--port-file', str(self.port_file_path)]
        if self.options.ttl is not None:
            args.extend(['--ttl', str(self.options.ttl)])
        return args

    async def _spawn(self, bin_path: Path) -> asyncio.subprocess.Process:
        # a port file left over from an earlier server would look ready
        self._remove_port_file()

        args = self._build_args(bin_path)
        logger.info(f"Starting PocketIC server: {' '.join(args)}")
        try:
            return await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=None if self.options.show_runtime_logs else asyncio.subprocess.DEVNULL,
                stderr=None if self.options.show_canister_logs else asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise classify_start_error(e) from e

    async def _read_port(self) -> int:
        return parse_port(self.port_file_path.read_text())

    async def _terminate(self) -> None:
        if self._process is None:
            return

        if self._process.returncode is None:
            try:
                self._process.terminate()
            except ProcessLookupError:
                pass  # already exited
        await self._process.wait()
        self._remove_port_file()

    async def _fail(self, outcome: str) -> None:
        self.state = ServerState.FAILED
        SERVER_STARTS.labels(outcome=outcome).inc()
        try:
            await self._terminate()
        except OSError as e:
            logger.error(f"Failed to clean up PocketIC process: {str(e)}")

    def _remove_port_file(self) -> None:
        try:
            self.port_file_path.unlink()
        except FileNotFoundError:
            pass

    async def __aenter__(self) -> 'PocketIcServer':
        if self.state == ServerState.NOT_STARTED:
            await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
