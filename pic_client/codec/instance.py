"""Wire codec for instance-level operations.

Covers instance creation, time, subnet lookup and subnet public keys. All
functions are pure: they take domain objects and return JSON-ready
structures, or the reverse.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.instance import (
    CreateInstanceRequest,
    CreateInstanceResponse,
    FromPathSubnetStateConfig,
    GetPubKeyRequest,
    GetSubnetIdRequest,
    GetSubnetIdResponse,
    GetTimeResponse,
    NewSubnetStateConfig,
    SetTimeRequest,
    SubnetConfig,
)
from ..utils.errors import (
    CreateInstanceError,
    ResponseShapeError,
    TopologyValidationError,
    UnknownTagError,
)
from .ids import base64_decode, decode_id, encode_id
from .topology import decode_instance_topology

logger = logging.getLogger(__name__)

NANOS_PER_MILLI = 1_000_000

SINGLE_SUBNET_ROLES = ('nns', 'sns', 'ii', 'fiduciary', 'bitcoin')
MULTI_SUBNET_ROLES = ('system', 'application', 'verified_application')

# Create instance

def default_application_subnet() -> SubnetConfig:
    return SubnetConfig(state=NewSubnetStateConfig())

def with_defaults(req: Optional[CreateInstanceRequest] = None) -> CreateInstanceRequest:
    """Apply create-instance defaults.

    A missing request, or one without an application list, gets a single
    fresh application subnet. nonmainnet_features defaults to False.
    """
    if req is None:
        return CreateInstanceRequest(
            application=[default_application_subnet()],
            nonmainnet_features=False,
        )

    return CreateInstanceRequest(
        nns=req.nns,
        sns=req.sns,
        ii=req.ii,
        fiduciary=req.fiduciary,
        bitcoin=req.bitcoin,
        system=list(req.system or []),
        application=list(req.application) if req.application is not None else [default_application_subnet()],
        verified_application=list(req.verified_application or []),
        nonmainnet_features=bool(req.nonmainnet_features),
        processing_timeout_ms=req.processing_timeout_ms,
    )

def encode_dts_flag(enable_deterministic_time_slicing: Optional[bool]) -> str:
    return 'Disabled' if enable_deterministic_time_slicing is False else 'Enabled'

def encode_instruction_config(enable_benchmarking_instruction_limits: Optional[bool]) -> str:
    return 'Benchmarking' if enable_benchmarking_instruction_limits is True else 'Production'

def encode_subnet_state_config(state) -> Union[str, Dict[str, Any]]:
    if isinstance(state, NewSubnetStateConfig):
        return 'New'
    elif isinstance(state, FromPathSubnetStateConfig):
        return {'FromPath': [state.path, {'subnet_id': encode_id(state.subnet_id)}]}
    raise UnknownTagError('subnet state type', state)

def encode_subnet_config(config: Optional[SubnetConfig]) -> Optional[Dict[str, Any]]:
    if config is None:
        return None

    return {
        'dts_flag': encode_dts_flag(config.enable_deterministic_time_slicing),
        'instruction_config': encode_instruction_config(config.enable_benchmarking_instruction_limits),
        'state_config': encode_subnet_state_config(config.state),
    }

def encode_many_subnet_configs(configs: Optional[List[SubnetConfig]]) -> List[Dict[str, Any]]:
    if any(config is None for config in configs or []):
        raise TopologyValidationError("Subnet config lists must not contain empty entries.")
    return [encode_subnet_config(config) for config in configs or []]

def validate_subnet_config_set(subnet_config_set: Dict[str, Any]) -> None:
    """Reject a subnet config set that creates no subnets."""
    for role in MULTI_SUBNET_ROLES:
        assert len(subnet_config_set[role]) >= 0

    has_single = any(subnet_config_set.get(role) is not None for role in SINGLE_SUBNET_ROLES)
    has_multi = any(len(subnet_config_set[role]) > 0 for role in MULTI_SUBNET_ROLES)
    if not (has_single or has_multi):
        raise TopologyValidationError()

def encode_create_instance_request(req: Optional[CreateInstanceRequest] = None) -> Dict[str, Any]:
    options = with_defaults(req)

    subnet_config_set = {role: encode_subnet_config(getattr(options, role)) for role in SINGLE_SUBNET_ROLES}
    for role in MULTI_SUBNET_ROLES:
        subnet_config_set[role] = encode_many_subnet_configs(getattr(options, role))

    validate_subnet_config_set(subnet_config_set)
    logger.debug(
        "Encoded create instance request: "
        f"{sum(subnet_config_set[role] is not None for role in SINGLE_SUBNET_ROLES)} single subnets, "
        f"{sum(len(subnet_config_set[role]) for role in MULTI_SUBNET_ROLES)} multi subnets"
    )

    return {
        'subnet_config_set': subnet_config_set,
        'nonmainnet_features': options.nonmainnet_features,
    }

def decode_create_instance_response(res: Dict[str, Any]) -> CreateInstanceResponse:
    if isinstance(res, dict) and 'Created' in res:
        created = res['Created']
        return CreateInstanceResponse(
            instance_id=created['instance_id'],
            topology=decode_instance_topology(created['topology']),
        )

    if isinstance(res, dict) and 'Error' in res:
        raise CreateInstanceError(res['Error']['message'])

    raise ResponseShapeError('create instance', res)

# Time

def millis_to_nanos(millis: Union[int, float]) -> int:
    if isinstance(millis, int):
        return millis * NANOS_PER_MILLI
    return int(millis * NANOS_PER_MILLI)

def nanos_to_millis(nanos: int) -> Union[int, float]:
    if nanos % NANOS_PER_MILLI == 0:
        return nanos // NANOS_PER_MILLI
    return nanos / NANOS_PER_MILLI

def encode_set_time_request(req: SetTimeRequest) -> Dict[str, int]:
    return {'nanos_since_epoch': millis_to_nanos(req.millis_since_epoch)}

def decode_get_time_response(res: Dict[str, int]) -> GetTimeResponse:
    return GetTimeResponse(millis_since_epoch=nanos_to_millis(res['nanos_since_epoch']))

# Canister subnet id

def encode_get_subnet_id_request(req: GetSubnetIdRequest) -> Dict[str, str]:
    return {'canister_id': encode_id(req.canister_id)}

def decode_get_subnet_id_response(res: Optional[Dict[str, str]]) -> GetSubnetIdResponse:
    if res is None or 'subnet_id' not in res:
        return GetSubnetIdResponse(subnet_id=None)
    return GetSubnetIdResponse(subnet_id=decode_id(res['subnet_id']))

# Subnet public key

def encode_get_pub_key_request(req: GetPubKeyRequest) -> Dict[str, str]:
    return {'subnet_id': encode_id(req.subnet_id)}

def decode_get_pub_key_response(res: Union[List[int], str]) -> bytes:
    """The key arrives either as a byte array or as base64 text."""
    if isinstance(res, str):
        return base64_decode(res)
    if isinstance(res, list):
        return bytes(res)
    raise ResponseShapeError('get public key', res)
