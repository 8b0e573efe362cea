"""Unit tests for the canister call codec."""
import pytest

from pic_client.codec.canister import (
    decode_add_cycles_response,
    decode_await_canister_call_response,
    decode_canister_call_response,
    decode_effective_principal,
    decode_get_cycles_balance_response,
    decode_get_stable_memory_response,
    decode_submit_canister_call_response,
    decode_upload_blob_response,
    encode_add_cycles_request,
    encode_await_canister_call_request,
    encode_canister_call_request,
    encode_effective_principal,
    encode_get_cycles_balance_request,
    encode_get_stable_memory_request,
    encode_set_stable_memory_request,
    encode_submit_canister_call_request,
    encode_upload_blob_request,
)
from pic_client.codec.ids import base64_encode, encode_id
from pic_client.models.canister import (
    AddCyclesRequest,
    CanisterCallRequest,
    CanisterEffectivePrincipal,
    GetCyclesBalanceRequest,
    GetStableMemoryRequest,
    SetStableMemoryRequest,
    SubmitCanisterCallResponse,
    SubnetEffectivePrincipal,
    UploadBlobRequest,
)
from pic_client.utils.errors import (
    CanisterApplicationError,
    CanisterRejectError,
    IdentifierDecodeError,
    ResponseShapeError,
    UnknownTagError,
)

class TestEffectivePrincipal:
    def test_none_encodes_to_sentinel(self):
        assert encode_effective_principal(None) == 'None'

    def test_sentinel_decodes_to_none(self):
        assert decode_effective_principal('None') is None

    def test_subnet_variant(self, subnet_id):
        encoded = encode_effective_principal(SubnetEffectivePrincipal(subnet_id))
        assert encoded == {'SubnetId': encode_id(subnet_id)}
        assert decode_effective_principal(encoded) == SubnetEffectivePrincipal(subnet_id)

    def test_canister_variant(self, canister_id):
        encoded = encode_effective_principal(CanisterEffectivePrincipal(canister_id))
        assert encoded == {'CanisterId': encode_id(canister_id)}
        assert decode_effective_principal(encoded) == CanisterEffectivePrincipal(canister_id)

    def test_unknown_variant(self, canister_id):
        with pytest.raises(UnknownTagError):
            encode_effective_principal(canister_id)
        with pytest.raises(UnknownTagError):
            decode_effective_principal({'UserId': encode_id(canister_id)})
        with pytest.raises(UnknownTagError):
            decode_effective_principal('none')

class TestCanisterCall:
    def test_call_envelope(self, sender, canister_id):
        req = CanisterCallRequest(
            sender=sender,
            canister_id=canister_id,
            method='greet',
            payload=b'DIDL\x00\x00',
        )
        assert encode_canister_call_request(req) == {
            'sender': encode_id(sender),
            'canister_id': encode_id(canister_id),
            'method': 'greet',
            'payload': base64_encode(b'DIDL\x00\x00'),
            'effective_principal': 'None',
        }

    def test_call_envelope_with_routing(self, sender, canister_id):
        req = CanisterCallRequest(sender, canister_id, 'greet', b'',
                                  effective_principal=CanisterEffectivePrincipal(canister_id))
        encoded = encode_submit_canister_call_request(req)
        assert encoded['effective_principal'] == {'CanisterId': encode_id(canister_id)}

    def test_reply(self):
        res = decode_canister_call_response({'Ok': {'Reply': base64_encode(b'hello')}})
        assert res.body == b'hello'

    def test_reject(self):
        with pytest.raises(CanisterRejectError) as excinfo:
            decode_canister_call_response({'Ok': {'Reject': 'no'}})
        assert excinfo.value.message == 'no'
        assert str(excinfo.value) == 'no'

    def test_application_error(self):
        with pytest.raises(CanisterApplicationError) as excinfo:
            decode_canister_call_response({'Err': {'code': 'X', 'description': 'boom'}})
        assert excinfo.value.message == 'boom'
        assert excinfo.value.error_code == 'X'

    def test_error_takes_precedence(self):
        with pytest.raises(CanisterApplicationError):
            decode_canister_call_response({'Err': {'code': 'X', 'description': 'boom'}, 'Ok': {'Reply': ''}})

    @pytest.mark.parametrize('res', [{}, {'Ok': {}}, {'Ok': 'Reply'}, [], None, {'Err': 'boom'}, {'Err': None}])
    def test_invalid_shapes(self, res):
        with pytest.raises(ResponseShapeError):
            decode_canister_call_response(res)

    def test_reply_must_be_base64(self):
        with pytest.raises(IdentifierDecodeError):
            decode_canister_call_response({'Ok': {'Reply': '%%%'}})

class TestSubmitAndAwait:
    def test_submit_response(self, subnet_id):
        res = decode_submit_canister_call_response({
            'Ok': {
                'effective_principal': {'SubnetId': encode_id(subnet_id)},
                'message_id': [1, 2, 3, 250],
            }
        })
        assert res.effective_principal == SubnetEffectivePrincipal(subnet_id)
        assert res.message_id == bytes([1, 2, 3, 250])

    def test_submit_error(self):
        with pytest.raises(CanisterApplicationError, match='canister not found'):
            decode_submit_canister_call_response({'Err': {'code': 'IC0301', 'description': 'canister not found'}})

    def test_submit_invalid_shape(self):
        with pytest.raises(ResponseShapeError):
            decode_submit_canister_call_response({'Ok': {'effective_principal': 'None'}})

    def test_submit_requires_effective_principal(self):
        with pytest.raises(ResponseShapeError):
            decode_submit_canister_call_response({'Ok': {'message_id': [1, 2, 3]}})

    def test_submit_then_await_replays_identifiers(self, canister_id):
        wire = {
            'Ok': {
                'effective_principal': {'CanisterId': encode_id(canister_id)},
                'message_id': list(range(32)),
            }
        }
        submitted = decode_submit_canister_call_response(wire)
        assert encode_await_canister_call_request(submitted) == wire['Ok']

    def test_await_without_routing(self):
        req = SubmitCanisterCallResponse(effective_principal=None, message_id=b'\x00\x01')
        assert encode_await_canister_call_request(req) == {
            'effective_principal': 'None',
            'message_id': [0, 1],
        }

    def test_await_response(self):
        assert decode_await_canister_call_response({'Ok': {'Reply': base64_encode(b'\x01')}}).body == b'\x01'
        with pytest.raises(CanisterRejectError):
            decode_await_canister_call_response({'Ok': {'Reject': 'later'}})

class TestCyclesAndMemory:
    def test_cycles(self, canister_id):
        assert encode_get_cycles_balance_request(GetCyclesBalanceRequest(canister_id)) == {
            'canister_id': encode_id(canister_id)
        }
        assert decode_get_cycles_balance_response({'cycles': 10 ** 12}).cycles == 10 ** 12
        assert encode_add_cycles_request(AddCyclesRequest(canister_id, 500)) == {
            'canister_id': encode_id(canister_id),
            'amount': 500,
        }
        assert decode_add_cycles_response({'cycles': 1500}).cycles == 1500

    def test_upload_blob(self):
        assert encode_upload_blob_request(UploadBlobRequest(bytearray(b'abc'))) == b'abc'
        assert decode_upload_blob_response('0a0b').blob_id == b'\x0a\x0b'
        assert decode_upload_blob_response('"0a0b"').blob_id == b'\x0a\x0b'

    def test_upload_blob_rejects_bad_hex(self):
        with pytest.raises(IdentifierDecodeError):
            decode_upload_blob_response('0a0')

    def test_stable_memory(self, canister_id):
        assert encode_set_stable_memory_request(SetStableMemoryRequest(canister_id, b'\x01\x02')) == {
            'canister_id': encode_id(canister_id),
            'blob_id': base64_encode(b'\x01\x02'),
        }
        assert encode_get_stable_memory_request(GetStableMemoryRequest(canister_id)) == {
            'canister_id': encode_id(canister_id)
        }
        assert decode_get_stable_memory_response({'blob': base64_encode(b'memory')}).blob == b'memory'
