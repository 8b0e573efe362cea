"""Domain models for the PocketIC client."""

from .principal import Principal
from .base_types import SubnetStateType, SubnetType, CanisterHttpMethod, ServerState
from .instance import (
    NewSubnetStateConfig,
    FromPathSubnetStateConfig,
    SubnetStateConfig,
    SubnetConfig,
    CreateInstanceRequest,
    CreateInstanceResponse,
    CanisterRange,
    SubnetTopology,
    InstanceTopology,
    GetTimeResponse,
    SetTimeRequest,
    GetSubnetIdRequest,
    GetSubnetIdResponse,
    GetPubKeyRequest
)
from .canister import (
    SubnetEffectivePrincipal,
    CanisterEffectivePrincipal,
    EffectivePrincipal,
    CanisterCallRequest,
    CanisterCallResponse,
    SubmitCanisterCallRequest,
    SubmitCanisterCallResponse,
    AwaitCanisterCallRequest,
    AwaitCanisterCallResponse,
    GetCyclesBalanceRequest,
    GetCyclesBalanceResponse,
    AddCyclesRequest,
    AddCyclesResponse,
    UploadBlobRequest,
    UploadBlobResponse,
    SetStableMemoryRequest,
    GetStableMemoryRequest,
    GetStableMemoryResponse
)
from .http import (
    CanisterHttpHeader,
    PendingHttpsOutcall,
    HttpsOutcallSuccessResponseMock,
    HttpsOutcallRejectResponseMock,
    HttpsOutcallResponseMock,
    MockPendingHttpsOutcallRequest
)

__all__ = [
    'Principal',
    'SubnetStateType',
    'SubnetType',
    'CanisterHttpMethod',
    'ServerState',
    'NewSubnetStateConfig',
    'FromPathSubnetStateConfig',
    'SubnetStateConfig',
    'SubnetConfig',
    'CreateInstanceRequest',
    'CreateInstanceResponse',
    'CanisterRange',
    'SubnetTopology',
    'InstanceTopology',
    'GetTimeResponse',
    'SetTimeRequest',
    'GetSubnetIdRequest',
    'GetSubnetIdResponse',
    'GetPubKeyRequest',
    'SubnetEffectivePrincipal',
    'CanisterEffectivePrincipal',
    'EffectivePrincipal',
    'CanisterCallRequest',
    'CanisterCallResponse',
    'SubmitCanisterCallRequest',
    'SubmitCanisterCallResponse',
    'AwaitCanisterCallRequest',
    'AwaitCanisterCallResponse',
    'GetCyclesBalanceRequest',
    'GetCyclesBalanceResponse',
    'AddCyclesRequest',
    'AddCyclesResponse',
    'UploadBlobRequest',
    'UploadBlobResponse',
    'SetStableMemoryRequest',
    'GetStableMemoryRequest',
    'GetStableMemoryResponse',
    'CanisterHttpHeader',
    'PendingHttpsOutcall',
    'HttpsOutcallSuccessResponseMock',
    'HttpsOutcallRejectResponseMock',
    'HttpsOutcallResponseMock',
    'MockPendingHttpsOutcallRequest'
]
