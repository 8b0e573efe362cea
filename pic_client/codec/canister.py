"""Wire codec for canister operations.

Handles the call envelope and its tagged results, the submit/await split,
effective principal routing, cycles, blobs and stable memory.
"""
from typing import Any, Dict, List, Optional, Union

from ..models.canister import (
    AddCyclesRequest,
    AddCyclesResponse,
    AwaitCanisterCallRequest,
    CanisterCallRequest,
    CanisterCallResponse,
    CanisterEffectivePrincipal,
    EffectivePrincipal,
    GetCyclesBalanceRequest,
    GetCyclesBalanceResponse,
    GetStableMemoryRequest,
    GetStableMemoryResponse,
    SetStableMemoryRequest,
    SubmitCanisterCallResponse,
    SubnetEffectivePrincipal,
    UploadBlobRequest,
    UploadBlobResponse,
)
from ..utils.errors import ResponseShapeError, UnknownTagError, raise_for_call_error
from .ids import base64_decode, base64_encode, decode_id, encode_id, hex_decode

NO_EFFECTIVE_PRINCIPAL = 'None'

EncodedEffectivePrincipal = Union[str, Dict[str, str]]

# Effective principal

def encode_effective_principal(effective_principal: Optional[EffectivePrincipal]) -> EncodedEffectivePrincipal:
    if effective_principal is None:
        return NO_EFFECTIVE_PRINCIPAL
    elif isinstance(effective_principal, SubnetEffectivePrincipal):
        return {'SubnetId': encode_id(effective_principal.subnet_id)}
    elif isinstance(effective_principal, CanisterEffectivePrincipal):
        return {'CanisterId': encode_id(effective_principal.canister_id)}
    raise UnknownTagError('effective principal', effective_principal)

def decode_effective_principal(encoded: EncodedEffectivePrincipal) -> Optional[EffectivePrincipal]:
    if encoded == NO_EFFECTIVE_PRINCIPAL:
        return None
    elif isinstance(encoded, dict) and 'SubnetId' in encoded:
        return SubnetEffectivePrincipal(subnet_id=decode_id(encoded['SubnetId']))
    elif isinstance(encoded, dict) and 'CanisterId' in encoded:
        return CanisterEffectivePrincipal(canister_id=decode_id(encoded['CanisterId']))
    raise UnknownTagError('effective principal', encoded)

# Canister call

def encode_canister_call_request(req: CanisterCallRequest) -> Dict[str, Any]:
    return {
        'sender': encode_id(req.sender),
        'canister_id': encode_id(req.canister_id),
        'method': req.method,
        'payload': base64_encode(req.payload),
        'effective_principal': encode_effective_principal(req.effective_principal),
    }

def decode_canister_call_response(res: Dict[str, Any]) -> CanisterCallResponse:
    """Return the reply body or raise the reject/application error it carries."""
    if not isinstance(res, dict):
        raise ResponseShapeError('canister call', res)

    raise_for_call_error(res)

    ok = res.get('Ok')
    if isinstance(ok, dict) and 'Reply' in ok:
        return CanisterCallResponse(body=base64_decode(ok['Reply']))

    raise ResponseShapeError('canister call', res)

# Submit / await

def encode_submit_canister_call_request(req: CanisterCallRequest) -> Dict[str, Any]:
    return encode_canister_call_request(req)

def encode_message_id(message_id: bytes) -> List[int]:
    return list(message_id)

def decode_message_id(encoded: Union[List[int], str]) -> bytes:
    if isinstance(encoded, list):
        return bytes(encoded)
    if isinstance(encoded, str):
        return base64_decode(encoded)
    raise ResponseShapeError('message id', encoded)

def decode_submit_canister_call_response(res: Dict[str, Any]) -> SubmitCanisterCallResponse:
    if not isinstance(res, dict):
        raise ResponseShapeError('submit canister call', res)

    raise_for_call_error(res)

    ok = res.get('Ok')
    if not isinstance(ok, dict) or 'message_id' not in ok or 'effective_principal' not in ok:
        raise ResponseShapeError('submit canister call', res)

    return SubmitCanisterCallResponse(
        effective_principal=decode_effective_principal(ok['effective_principal']),
        message_id=decode_message_id(ok['message_id']),
    )

def encode_await_canister_call_request(req: AwaitCanisterCallRequest) -> Dict[str, Any]:
    return {
        'effective_principal': encode_effective_principal(req.effective_principal),
        'message_id': encode_message_id(req.message_id),
    }

def decode_await_canister_call_response(res: Dict[str, Any]) -> CanisterCallResponse:
    return decode_canister_call_response(res)

# Cycles

def encode_get_cycles_balance_request(req: GetCyclesBalanceRequest) -> Dict[str, str]:
    return {'canister_id': encode_id(req.canister_id)}

def decode_get_cycles_balance_response(res: Dict[str, int]) -> GetCyclesBalanceResponse:
    return GetCyclesBalanceResponse(cycles=res['cycles'])

def encode_add_cycles_request(req: AddCyclesRequest) -> Dict[str, Any]:
    return {
        'canister_id': encode_id(req.canister_id),
        'amount': req.amount,
    }

def decode_add_cycles_response(res: Dict[str, int]) -> AddCyclesResponse:
    return AddCyclesResponse(cycles=res['cycles'])

# Blobs and stable memory

def encode_upload_blob_request(req: UploadBlobRequest) -> bytes:
    return bytes(req.blob)

def decode_upload_blob_response(res: str) -> UploadBlobResponse:
    # the server may return the hex id as a JSON string
    return UploadBlobResponse(blob_id=hex_decode(res.strip().strip('"')))

def encode_set_stable_memory_request(req: SetStableMemoryRequest) -> Dict[str, str]:
    return {
        'canister_id': encode_id(req.canister_id),
        'blob_id': base64_encode(req.blob_id),
    }

def encode_get_stable_memory_request(req: GetStableMemoryRequest) -> Dict[str, str]:
    return {'canister_id': encode_id(req.canister_id)}

def decode_get_stable_memory_response(res: Dict[str, str]) -> GetStableMemoryResponse:
    return GetStableMemoryResponse(blob=base64_decode(res['blob']))
