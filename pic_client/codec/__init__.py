"""Protocol codec between the domain models and the PocketIC wire format."""

from .ids import (
    base64_encode,
    base64_decode,
    hex_encode,
    hex_decode,
    encode_id,
    decode_id
)

from .topology import (
    decode_subnet_kind,
    decode_instance_topology
)

from .instance import (
    with_defaults,
    encode_create_instance_request,
    decode_create_instance_response,
    encode_set_time_request,
    decode_get_time_response,
    encode_get_subnet_id_request,
    decode_get_subnet_id_response,
    encode_get_pub_key_request,
    decode_get_pub_key_response
)

from .canister import (
    encode_effective_principal,
    decode_effective_principal,
    encode_canister_call_request,
    decode_canister_call_response,
    encode_submit_canister_call_request,
    decode_submit_canister_call_response,
    encode_await_canister_call_request,
    decode_await_canister_call_response,
    encode_get_cycles_balance_request,
    decode_get_cycles_balance_response,
    encode_add_cycles_request,
    decode_add_cycles_response,
    encode_upload_blob_request,
    decode_upload_blob_response,
    encode_set_stable_memory_request,
    encode_get_stable_memory_request,
    decode_get_stable_memory_response
)

from .http import (
    decode_get_pending_https_outcalls_response,
    encode_mock_pending_https_outcall_request
)

__all__ = [
    # Identifiers
    'base64_encode',
    'base64_decode',
    'hex_encode',
    'hex_decode',
    'encode_id',
    'decode_id',

    # Topology
    'decode_subnet_kind',
    'decode_instance_topology',

    # Instance
    'with_defaults',
    'encode_create_instance_request',
    'decode_create_instance_response',
    'encode_set_time_request',
    'decode_get_time_response',
    'encode_get_subnet_id_request',
    'decode_get_subnet_id_response',
    'encode_get_pub_key_request',
    'decode_get_pub_key_response',

    # Canister
    'encode_effective_principal',
    'decode_effective_principal',
    'encode_canister_call_request',
    'decode_canister_call_response',
    'encode_submit_canister_call_request',
    'decode_submit_canister_call_response',
    'encode_await_canister_call_request',
    'decode_await_canister_call_response',
    'encode_get_cycles_balance_request',
    'decode_get_cycles_balance_response',
    'encode_add_cycles_request',
    'decode_add_cycles_response',
    'encode_upload_blob_request',
    'decode_upload_blob_response',
    'encode_set_stable_memory_request',
    'encode_get_stable_memory_request',
    'decode_get_stable_memory_response',

    # HTTPS outcalls
    'decode_get_pending_https_outcalls_response',
    'encode_mock_pending_https_outcall_request'
]
