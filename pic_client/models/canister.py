"""Canister-level models: calls, cycles, stable memory and blobs."""
from dataclasses import dataclass, field
from typing import Optional, Union

from .principal import Principal

@dataclass(frozen=True)
class SubnetEffectivePrincipal:
    """Route a call to a specific subnet."""
    subnet_id: Principal

@dataclass(frozen=True)
class CanisterEffectivePrincipal:
    """Route a call through a specific canister's subnet."""
    canister_id: Principal

# None means default routing
EffectivePrincipal = Union[SubnetEffectivePrincipal, CanisterEffectivePrincipal]

@dataclass
class CanisterCallRequest:
    """An update or query call against a canister."""
    sender: Principal
    canister_id: Principal
    method: str
    payload: bytes = b''
    effective_principal: Optional[EffectivePrincipal] = None

SubmitCanisterCallRequest = CanisterCallRequest

@dataclass
class CanisterCallResponse:
    body: bytes

@dataclass
class SubmitCanisterCallResponse:
    """Identifies a submitted call; pass it back unchanged to await the result."""
    effective_principal: Optional[EffectivePrincipal]
    message_id: bytes = field(default=b'')

AwaitCanisterCallRequest = SubmitCanisterCallResponse
AwaitCanisterCallResponse = CanisterCallResponse

@dataclass
class GetCyclesBalanceRequest:
    canister_id: Principal

@dataclass
class GetCyclesBalanceResponse:
    cycles: int

@dataclass
class AddCyclesRequest:
    canister_id: Principal
    amount: int

@dataclass
class AddCyclesResponse:
    cycles: int

@dataclass
class UploadBlobRequest:
    blob: bytes

@dataclass
class UploadBlobResponse:
    blob_id: bytes

@dataclass
class SetStableMemoryRequest:
    canister_id: Principal
    blob_id: bytes

@dataclass
class GetStableMemoryRequest:
    canister_id: Principal

@dataclass
class GetStableMemoryResponse:
    blob: bytes
