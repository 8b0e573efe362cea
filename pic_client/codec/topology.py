"""Rebuild an instance topology from the server's keyed wire map."""
from typing import Any, Dict

from ..models.base_types import SubnetType
from ..models.instance import CanisterRange, InstanceTopology, SubnetTopology
from ..models.principal import Principal
from ..utils.errors import UnknownTagError
from .ids import decode_id

SUBNET_KINDS = {
    'Application': SubnetType.APPLICATION,
    'Bitcoin': SubnetType.BITCOIN,
    'Fiduciary': SubnetType.FIDUCIARY,
    'II': SubnetType.INTERNET_IDENTITY,
    'NNS': SubnetType.NNS,
    'SNS': SubnetType.SNS,
    'System': SubnetType.SYSTEM,
}

def decode_subnet_kind(kind: str) -> SubnetType:
    """Exact match against the known subnet kind tokens."""
    try:
        return SUBNET_KINDS[kind]
    except (KeyError, TypeError):
        raise UnknownTagError('subnet kind', kind) from None

def decode_canister_range(encoded: Dict[str, Any]) -> CanisterRange:
    return CanisterRange(
        start=decode_id(encoded['start']['canister_id']),
        end=decode_id(encoded['end']['canister_id']),
    )

def decode_subnet_topology(subnet_id: str, encoded: Dict[str, Any]) -> SubnetTopology:
    return SubnetTopology(
        id=Principal.from_text(subnet_id),
        type=decode_subnet_kind(encoded['subnet_kind']),
        size=encoded['size'],
        canister_ranges=[decode_canister_range(r) for r in encoded.get('canister_ranges', [])],
    )

def decode_instance_topology(encoded: Dict[str, Dict[str, Any]]) -> InstanceTopology:
    """Decode every subnet entry, keeping the wire map's order."""
    return {
        subnet_id: decode_subnet_topology(subnet_id, subnet_topology)
        for subnet_id, subnet_topology in encoded.items()
    }
