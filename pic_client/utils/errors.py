"""Error taxonomy and classification for the PocketIC client."""

import asyncio
import logging
import platform
from functools import wraps
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)

class PicError(Exception):
    """Base class for PocketIC client errors."""
    def __init__(self, message, code='PicError'):
        super().__init__(message)
        self.message = message
        self.code = code

# Process-level failures

class BinNotFoundError(PicError):
    """PocketIC binary does not exist at the resolved path."""
    def __init__(self, bin_path):
        super().__init__(
            f"Could not find the PocketIC binary. The PocketIC binary could not be found at {bin_path}. "
            "Please ensure the binary is installed or set PIC_BIN_PATH.",
            "BinNotFound"
        )
        self.bin_path = bin_path

class BinStartError(PicError):
    """PocketIC binary could not be launched."""
    def __init__(self, cause: BaseException, message=None, code='BinStart'):
        super().__init__(
            message or f"There was an error starting the PocketIC binary: {cause}",
            code
        )
        self.cause = cause

class BinStartMacOSArmError(BinStartError):
    """Launch failure on Apple Silicon, where the x86_64 binary needs Rosetta."""
    def __init__(self, cause: BaseException):
        super().__init__(
            cause,
            f"There was an error starting the PocketIC binary: {cause}. "
            "The PocketIC binary is built for x86_64 and this machine is arm64. "
            "Install Rosetta 2 with `softwareupdate --install-rosetta` and try again.",
            "BinStartMacOSArm"
        )

class BinTimeoutError(PicError):
    """No listening port was observed before the readiness timeout."""
    def __init__(self, timeout_ms: Optional[int] = None):
        detail = f" after {timeout_ms}ms" if timeout_ms is not None else ""
        super().__init__(
            f"The PocketIC binary took too long to start{detail}. Please try again.",
            "BinTimeout"
        )
        self.timeout_ms = timeout_ms

class ServerStopError(PicError):
    """The PocketIC process reported an error while being terminated."""
    def __init__(self, cause: BaseException):
        super().__init__(f"There was an error stopping the PocketIC server: {cause}", "ServerStop")
        self.cause = cause

class ServerNotReadyError(PicError):
    """The server URL was requested before the server became ready."""
    def __init__(self, state):
        super().__init__(f"The PocketIC server is not ready (state: {state})", "ServerNotReady")
        self.state = state

# Protocol-level failures

class TopologyValidationError(PicError):
    """A create-instance request does not describe any subnet."""
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "The provided subnet configuration is invalid. At least one subnet must be "
            "configured (NNS, SNS, II, Fiduciary, Bitcoin, System, Application or Verified Application).",
            "TopologyValidation"
        )

class UnknownTagError(PicError):
    """A variant tag on either side of the wire was not recognised."""
    def __init__(self, kind: str, value: Any):
        super().__init__(f"Unknown {kind}: {value!r}", "UnknownTag")
        self.kind = kind
        self.value = value

class IdentifierDecodeError(PicError, ValueError):
    """A textual identifier or blob encoding is malformed."""
    def __init__(self, message):
        super().__init__(message, "IdentifierDecode")

class ResponseShapeError(PicError):
    """A wire response did not match any expected shape."""
    def __init__(self, operation: str, payload: Any):
        super().__init__(f"Unexpected response shape for {operation}: {payload!r}", "ResponseShape")
        self.operation = operation
        self.payload = payload

class CanisterRejectError(PicError):
    """The canister rejected the call."""
    def __init__(self, reject_message: str):
        super().__init__(reject_message, "CanisterReject")
        self.reject_message = reject_message

class CanisterApplicationError(PicError):
    """The replica returned an application error for the call."""
    def __init__(self, description: str, error_code: Optional[str] = None):
        super().__init__(description, "CanisterApplicationError")
        self.description = description
        self.error_code = error_code

class CreateInstanceError(PicError):
    """The server refused to create an instance."""
    def __init__(self, message: str):
        super().__init__(message, "CreateInstance")

class ServerRequestError(PicError):
    """Transport-level failure talking to the PocketIC server."""
    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message, "ServerRequest")
        self.status = status
        self.body = body

def is_macos_arm(machine: Optional[str] = None, system: Optional[str] = None) -> bool:
    """Check for the arm64/macOS pairing the binary cannot run on natively."""
    machine = (machine or platform.machine()).lower()
    system = system or platform.system()
    return system == 'Darwin' and machine in ('arm64', 'aarch64')

def classify_start_error(error: BaseException, machine: Optional[str] = None,
                         system: Optional[str] = None) -> BinStartError:
    """Map a launch failure onto the start error taxonomy."""
    if is_macos_arm(machine, system):
        return BinStartMacOSArmError(error)
    return BinStartError(error)

def raise_for_call_error(payload: Dict[str, Any]) -> None:
    """Raise the matching error if a call response carries a failure."""
    if 'Err' in payload:
        err = payload['Err']
        if not isinstance(err, dict):
            raise ResponseShapeError('canister call', payload)
        raise CanisterApplicationError(err.get('description', ''), err.get('code'))

    ok = payload.get('Ok')
    if isinstance(ok, dict) and 'Reject' in ok:
        raise CanisterRejectError(ok['Reject'])

def handle_request_errors(f):
    """Decorator to surface transport failures as ServerRequestError.

    PicError subclasses raised by the codec pass through untouched.
    """
    @wraps(f)
    async def wrapped(*args, **kwargs):
        try:
            return await f(*args, **kwargs)
        except PicError as e:
            logger.error(f"PocketIC error in {f.__name__}: {e.message}")
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Request error in {f.__name__}: {str(e)}")
            raise ServerRequestError(f"Request to PocketIC server failed in {f.__name__}: {e}") from e
    return wrapped
