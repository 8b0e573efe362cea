"""Instance-level models: subnet configuration, topology and time."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .base_types import SubnetStateType, SubnetType
from .principal import Principal

@dataclass(frozen=True)
class NewSubnetStateConfig:
    """Start the subnet from a fresh state."""
    type: SubnetStateType = field(default=SubnetStateType.NEW, init=False)

@dataclass(frozen=True)
class FromPathSubnetStateConfig:
    """Load the subnet state from a directory on disk."""
    path: str
    subnet_id: Principal
    type: SubnetStateType = field(default=SubnetStateType.FROM_PATH, init=False)

SubnetStateConfig = Union[NewSubnetStateConfig, FromPathSubnetStateConfig]

@dataclass
class SubnetConfig:
    """Configuration for a single subnet of a new instance.

    Unset flags fall back to the server defaults applied by the codec:
    deterministic time slicing enabled and production instruction limits.
    """
    state: SubnetStateConfig = field(default_factory=NewSubnetStateConfig)
    enable_deterministic_time_slicing: Optional[bool] = None
    enable_benchmarking_instruction_limits: Optional[bool] = None

@dataclass
class CreateInstanceRequest:
    """Subnets to create for a new PocketIC instance."""
    nns: Optional[SubnetConfig] = None
    sns: Optional[SubnetConfig] = None
    ii: Optional[SubnetConfig] = None
    fiduciary: Optional[SubnetConfig] = None
    bitcoin: Optional[SubnetConfig] = None
    system: Optional[List[SubnetConfig]] = None
    application: Optional[List[SubnetConfig]] = None
    verified_application: Optional[List[SubnetConfig]] = None
    nonmainnet_features: Optional[bool] = None
    processing_timeout_ms: Optional[int] = None

@dataclass(frozen=True)
class CanisterRange:
    """Inclusive range of canister ids owned by a subnet."""
    start: Principal
    end: Principal

@dataclass
class SubnetTopology:
    """A subnet as reported by the server."""
    id: Principal
    type: SubnetType
    size: int
    canister_ranges: List[CanisterRange] = field(default_factory=list)

InstanceTopology = Dict[str, SubnetTopology]

@dataclass
class CreateInstanceResponse:
    instance_id: int
    topology: InstanceTopology

@dataclass
class GetTimeResponse:
    millis_since_epoch: Union[int, float]

@dataclass
class SetTimeRequest:
    millis_since_epoch: Union[int, float]

@dataclass
class GetSubnetIdRequest:
    canister_id: Principal

@dataclass
class GetSubnetIdResponse:
    subnet_id: Optional[Principal]

@dataclass
class GetPubKeyRequest:
    subnet_id: Principal
