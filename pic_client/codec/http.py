"""Wire codec for canister HTTPS outcalls and their mocks."""
from typing import Any, Dict, List

from ..models.base_types import CanisterHttpMethod
from ..models.http import (
    CanisterHttpHeader,
    HttpsOutcallRejectResponseMock,
    HttpsOutcallSuccessResponseMock,
    MockPendingHttpsOutcallRequest,
    PendingHttpsOutcall,
)
from ..utils.errors import UnknownTagError
from .ids import base64_decode, base64_encode, decode_id, encode_id

HTTP_METHODS = {method.value: method for method in CanisterHttpMethod}

def decode_canister_http_method(method: str) -> CanisterHttpMethod:
    try:
        return HTTP_METHODS[method]
    except (KeyError, TypeError):
        raise UnknownTagError('canister HTTP method', method) from None

def encode_http_header(header: CanisterHttpHeader) -> Dict[str, str]:
    name, value = header
    return {'name': name, 'value': value}

def decode_http_header(header: Dict[str, str]) -> CanisterHttpHeader:
    return (header['name'], header['value'])

def decode_http_outcall(res: Dict[str, Any]) -> PendingHttpsOutcall:
    return PendingHttpsOutcall(
        subnet_id=decode_id(res['subnet_id']['subnet_id']),
        request_id=res['request_id'],
        http_method=decode_canister_http_method(res['http_method']),
        url=res['url'],
        headers=[decode_http_header(h) for h in res.get('headers', [])],
        body=base64_decode(res['body']),
        max_response_bytes=res.get('max_response_bytes'),
    )

def decode_get_pending_https_outcalls_response(res: List[Dict[str, Any]]) -> List[PendingHttpsOutcall]:
    return [decode_http_outcall(outcall) for outcall in res]

def encode_https_outcall_response(res) -> Dict[str, Any]:
    if isinstance(res, HttpsOutcallSuccessResponseMock):
        return {
            'CanisterHttpReply': {
                'status': res.status_code,
                'headers': [encode_http_header(h) for h in res.headers],
                'body': base64_encode(res.body),
            }
        }
    elif isinstance(res, HttpsOutcallRejectResponseMock):
        return {
            'CanisterHttpReject': {
                'reject_code': res.status_code,
                'message': res.message,
            }
        }
    raise UnknownTagError('HTTPS outcall response type', res)

def encode_mock_pending_https_outcall_request(req: MockPendingHttpsOutcallRequest) -> Dict[str, Any]:
    return {
        'subnet_id': {
            'subnet_id': encode_id(req.subnet_id),
        },
        'request_id': req.request_id,
        'response': encode_https_outcall_response(req.response),
        'additional_responses': [encode_https_outcall_response(r) for r in req.additional_responses],
    }
