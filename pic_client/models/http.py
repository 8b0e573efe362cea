"""Models for HTTPS outcalls issued by canisters and their mocks."""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .base_types import CanisterHttpMethod
from .principal import Principal

CanisterHttpHeader = Tuple[str, str]

@dataclass
class PendingHttpsOutcall:
    """An outbound HTTP request a canister is waiting on."""
    subnet_id: Principal
    request_id: int
    http_method: CanisterHttpMethod
    url: str
    headers: List[CanisterHttpHeader] = field(default_factory=list)
    body: bytes = b''
    max_response_bytes: Optional[int] = None

@dataclass
class HttpsOutcallSuccessResponseMock:
    status_code: int
    headers: List[CanisterHttpHeader] = field(default_factory=list)
    body: bytes = b''

@dataclass
class HttpsOutcallRejectResponseMock:
    status_code: int
    message: str

HttpsOutcallResponseMock = Union[HttpsOutcallSuccessResponseMock, HttpsOutcallRejectResponseMock]

@dataclass
class MockPendingHttpsOutcallRequest:
    """Responses to feed a pending outcall.

    additional_responses are consumed in order by the replicas after the
    primary response.
    """
    subnet_id: Principal
    request_id: int
    response: HttpsOutcallResponseMock
    additional_responses: List[HttpsOutcallResponseMock] = field(default_factory=list)
