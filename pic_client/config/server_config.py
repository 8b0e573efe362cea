"""Server configuration management."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from . import base_config

DEFAULT_BIN_PATH = Path(__file__).resolve().parent.parent / 'bin' / 'pocket-ic'

@dataclass
class StartServerOptions:
    """Options for starting a PocketIC server."""
    # Pipe the runtime's logs (stdout) to the parent process's stdout
    show_runtime_logs: bool = False
    # Pipe the canister logs (stderr) to the parent process's stderr
    show_canister_logs: bool = False
    # Path to the PocketIC binary, defaults to the one bundled with the package
    bin_path: Optional[str] = None
    # Time-to-live of the server in seconds, server default when unset
    ttl: Optional[int] = None

    # Readiness polling
    poll_interval_ms: int = 20
    poll_timeout_ms: int = 30_000
    port_file_dir: str = field(default_factory=tempfile.gettempdir)

    def resolve_bin_path(self) -> Path:
        return Path(self.bin_path) if self.bin_path else DEFAULT_BIN_PATH

@dataclass
class ClientConfig:
    url: Optional[str]
    request_timeout_ms: int

def load_server_config() -> StartServerOptions:
    """Load server start options from environment variables."""
    return StartServerOptions(
        show_runtime_logs=base_config.SHOW_RUNTIME_LOGS,
        show_canister_logs=base_config.SHOW_CANISTER_LOGS,
        bin_path=base_config.PIC_BIN_PATH,
        ttl=base_config.PIC_TTL,
        poll_interval_ms=base_config.POLL_INTERVAL_MS,
        poll_timeout_ms=base_config.POLL_TIMEOUT_MS,
    )

def load_client_config() -> ClientConfig:
    """Load client settings from environment variables."""
    return ClientConfig(
        url=base_config.PIC_URL,
        request_timeout_ms=base_config.REQUEST_TIMEOUT_MS,
    )
