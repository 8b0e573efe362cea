"""Base enums shared across the PocketIC models."""
from enum import Enum

class SubnetStateType(Enum):
    """How a subnet's initial state is obtained."""
    NEW = "new"
    FROM_PATH = "fromPath"

class SubnetType(Enum):
    """Subnet kinds reported in an instance topology."""
    APPLICATION = "Application"
    BITCOIN = "Bitcoin"
    FIDUCIARY = "Fiduciary"
    INTERNET_IDENTITY = "II"
    NNS = "NNS"
    SNS = "SNS"
    SYSTEM = "System"

class CanisterHttpMethod(Enum):
    """HTTP methods a canister may use for an outcall."""
    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"

class ServerState(Enum):
    """Lifecycle of a supervised PocketIC process."""
    NOT_STARTED = "not_started"
    STARTING = "starting"
    READY = "ready"
    STOPPED = "stopped"
    FAILED = "failed"
