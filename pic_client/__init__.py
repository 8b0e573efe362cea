"""Client library for driving a local PocketIC server from Python tests."""

from .api.client import PocketIcClient
from .config.server_config import StartServerOptions
from .infrastructure.server import PocketIcServer
from .models import (
    Principal,
    SubnetStateType,
    SubnetType,
    ServerState,
    NewSubnetStateConfig,
    FromPathSubnetStateConfig,
    SubnetConfig,
    CreateInstanceRequest,
    CanisterCallRequest,
    SubnetEffectivePrincipal,
    CanisterEffectivePrincipal,
    HttpsOutcallSuccessResponseMock,
    HttpsOutcallRejectResponseMock,
    MockPendingHttpsOutcallRequest
)
from .utils.errors import PicError

__version__ = '0.1.0'

__all__ = [
    'PocketIcClient',
    'PocketIcServer',
    'StartServerOptions',
    'Principal',
    'SubnetStateType',
    'SubnetType',
    'ServerState',
    'NewSubnetStateConfig',
    'FromPathSubnetStateConfig',
    'SubnetConfig',
    'CreateInstanceRequest',
    'CanisterCallRequest',
    'SubnetEffectivePrincipal',
    'CanisterEffectivePrincipal',
    'HttpsOutcallSuccessResponseMock',
    'HttpsOutcallRejectResponseMock',
    'MockPendingHttpsOutcallRequest',
    'PicError'
]
