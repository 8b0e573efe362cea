"""HTTP client for a single PocketIC instance."""

import json
import logging
import time
from typing import Any, List, Optional

import aiohttp

from ..codec import canister as canister_codec
from ..codec import http as http_codec
from ..codec import instance as instance_codec
from ..codec.topology import decode_instance_topology
from ..config.server_config import load_client_config
from ..models.canister import (
    AddCyclesRequest,
    AwaitCanisterCallRequest,
    CanisterCallRequest,
    GetCyclesBalanceRequest,
    GetStableMemoryRequest,
    SetStableMemoryRequest,
    SubmitCanisterCallResponse,
    UploadBlobRequest,
)
from ..models.http import MockPendingHttpsOutcallRequest, PendingHttpsOutcall
from ..models.instance import (
    CreateInstanceRequest,
    GetPubKeyRequest,
    GetSubnetIdRequest,
    InstanceTopology,
    SetTimeRequest,
)
from ..models.principal import Principal
from ..monitoring.metrics import REQUEST_COUNT, REQUEST_LATENCY
from ..utils.errors import ResponseShapeError, ServerRequestError, handle_request_errors

logger = logging.getLogger(__name__)


class PocketIcClient:
    """Sends encoded requests to one PocketIC instance and decodes the replies."""

    def __init__(self, session: aiohttp.ClientSession, server_url: str, instance_id: int,
                 topology: Optional[InstanceTopology] = None, owns_session: bool = True):
        self.session = session
        self.server_url = server_url.rstrip('/')
        self.instance_id = instance_id
        self.topology = topology or {}
        self._owns_session = owns_session

    @property
    def instance_path(self) -> str:
        return f"/instances/{self.instance_id}"

    @classmethod
    async def create(cls, url: Optional[str] = None, req: Optional[CreateInstanceRequest] = None,
                     session: Optional[aiohttp.ClientSession] = None) -> 'PocketIcClient':
        """Create a new instance on the server at ``url``."""
        config = load_client_config()
        url = url or config.url
        if not url:
            raise ValueError("No PocketIC server URL given and PIC_URL is not set")

        timeout_ms = (req.processing_timeout_ms if req and req.processing_timeout_ms
                      else config.request_timeout_ms)
        owns_session = session is None
        if session is None:
            session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout_ms / 1000))

        client = cls(session, url, instance_id=-1, owns_session=owns_session)
        try:
            body = instance_codec.encode_create_instance_request(req)
            res = await client._request('POST', '/instances', json_body=body)
            created = instance_codec.decode_create_instance_response(res)
        except Exception:
            await client.close()
            raise

        client.instance_id = created.instance_id
        client.topology = created.topology
        logger.info(f"Created PocketIC instance {client.instance_id} with {len(client.topology)} subnets")
        return client

    async def close(self) -> None:
        if self._owns_session and not self.session.closed:
            await self.session.close()

    @handle_request_errors
    async def _request(self, method: str, path: str, json_body: Any = None,
                       data: Optional[bytes] = None, expect_json: bool = True) -> Any:
        url = f"{self.server_url}{path}"
        kwargs = {}
        if json_body is not None:
            kwargs['json'] = json_body
        elif data is not None:
            kwargs['data'] = data
            kwargs['headers'] = {'Content-Type': 'application/octet-stream'}

        logger.debug(f"{method} {url}")
        start_time = time.monotonic()
        endpoint = self._endpoint_label(path)
        try:
            async with self.session.request(method, url, **kwargs) as response:
                text = await response.text()
                if response.status >= 400:
                    REQUEST_COUNT.labels(method=method, endpoint=endpoint, outcome='error').inc()
                    raise ServerRequestError(
                        f"PocketIC server returned {response.status} for {method} {path}: {text}",
                        status=response.status,
                        body=text,
                    )
                REQUEST_COUNT.labels(method=method, endpoint=endpoint, outcome='ok').inc()
                if not expect_json:
                    return text
                if not text:
                    return None
                try:
                    return json.loads(text)
                except ValueError:
                    raise ResponseShapeError(f"{method} {endpoint}", text) from None
        finally:
            REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(time.monotonic() - start_time)

    def _endpoint_label(self, path: str) -> str:
        # collapse the instance id so labels stay bounded
        if path.startswith(self.instance_path + '/'):
            return '/instances/{id}' + path[len(self.instance_path):]
        if path == self.instance_path:
            return '/instances/{id}'
        return path

    # Instance

    async def tear_down(self) -> None:
        """Delete the instance and close the session."""
        try:
            await self._request('DELETE', self.instance_path, expect_json=False)
            logger.info(f"Deleted PocketIC instance {self.instance_id}")
        finally:
            await self.close()

    async def get_topology(self) -> InstanceTopology:
        res = await self._request('GET', f"{self.instance_path}/_/topology")
        self.topology = decode_instance_topology(res)
        return self.topology

    async def tick(self) -> None:
        await self._request('POST', f"{self.instance_path}/update/tick", expect_json=False)

    async def get_time(self):
        """Current time of the instance in milliseconds since the epoch."""
        res = await self._request('GET', f"{self.instance_path}/read/get_time")
        return instance_codec.decode_get_time_response(res).millis_since_epoch

    async def set_time(self, millis_since_epoch) -> None:
        body = instance_codec.encode_set_time_request(SetTimeRequest(millis_since_epoch))
        await self._request('POST', f"{self.instance_path}/update/set_time", json_body=body, expect_json=False)

    async def get_subnet_id(self, canister_id: Principal) -> Optional[Principal]:
        body = instance_codec.encode_get_subnet_id_request(GetSubnetIdRequest(canister_id))
        res = await self._request('POST', f"{self.instance_path}/read/get_subnet", json_body=body)
        return instance_codec.decode_get_subnet_id_response(res).subnet_id

    async def get_pub_key(self, subnet_id: Principal) -> bytes:
        body = instance_codec.encode_get_pub_key_request(GetPubKeyRequest(subnet_id))
        res = await self._request('POST', f"{self.instance_path}/read/pub_key", json_body=body)
        return instance_codec.decode_get_pub_key_response(res)

    # Cycles

    async def get_cycles_balance(self, canister_id: Principal) -> int:
        body = canister_codec.encode_get_cycles_balance_request(GetCyclesBalanceRequest(canister_id))
        res = await self._request('POST', f"{self.instance_path}/read/get_cycles", json_body=body)
        return canister_codec.decode_get_cycles_balance_response(res).cycles

    async def add_cycles(self, canister_id: Principal, amount: int) -> int:
        body = canister_codec.encode_add_cycles_request(AddCyclesRequest(canister_id, amount))
        res = await self._request('POST', f"{self.instance_path}/update/add_cycles", json_body=body)
        return canister_codec.decode_add_cycles_response(res).cycles

    # Blobs and stable memory

    async def upload_blob(self, blob: bytes) -> bytes:
        data = canister_codec.encode_upload_blob_request(UploadBlobRequest(blob))
        res = await self._request('POST', '/blobstore', data=data, expect_json=False)
        return canister_codec.decode_upload_blob_response(res).blob_id

    async def set_stable_memory(self, canister_id: Principal, blob: bytes) -> None:
        blob_id = await self.upload_blob(blob)
        body = canister_codec.encode_set_stable_memory_request(SetStableMemoryRequest(canister_id, blob_id))
        await self._request('POST', f"{self.instance_path}/update/set_stable_memory",
                            json_body=body, expect_json=False)

    async def get_stable_memory(self, canister_id: Principal) -> bytes:
        body = canister_codec.encode_get_stable_memory_request(GetStableMemoryRequest(canister_id))
        res = await self._request('POST', f"{self.instance_path}/read/get_stable_memory", json_body=body)
        return canister_codec.decode_get_stable_memory_response(res).blob

    # HTTPS outcalls

    async def get_pending_https_outcalls(self) -> List[PendingHttpsOutcall]:
        res = await self._request('GET', f"{self.instance_path}/read/get_canister_http")
        return http_codec.decode_get_pending_https_outcalls_response(res or [])

    async def mock_pending_https_outcall(self, req: MockPendingHttpsOutcallRequest) -> None:
        body = http_codec.encode_mock_pending_https_outcall_request(req)
        await self._request('POST', f"{self.instance_path}/update/mock_canister_http",
                            json_body=body, expect_json=False)

    # Canister calls

    async def update_call(self, req: CanisterCallRequest) -> bytes:
        body = canister_codec.encode_canister_call_request(req)
        res = await self._request('POST', f"{self.instance_path}/update/execute_ingress_message", json_body=body)
        return canister_codec.decode_canister_call_response(res).body

    async def query_call(self, req: CanisterCallRequest) -> bytes:
        body = canister_codec.encode_canister_call_request(req)
        res = await self._request('POST', f"{self.instance_path}/read/query", json_body=body)
        return canister_codec.decode_canister_call_response(res).body

    async def submit_call(self, req: CanisterCallRequest) -> SubmitCanisterCallResponse:
        """Admit an update call without waiting for its result."""
        body = canister_codec.encode_submit_canister_call_request(req)
        res = await self._request('POST', f"{self.instance_path}/update/submit_ingress_message", json_body=body)
        return canister_codec.decode_submit_canister_call_response(res)

    async def await_call(self, req: AwaitCanisterCallRequest) -> bytes:
        """Wait for the result of a call returned by :meth:`submit_call`."""
        body = canister_codec.encode_await_canister_call_request(req)
        res = await self._request('POST', f"{self.instance_path}/update/await_ingress_message", json_body=body)
        return canister_codec.decode_await_canister_call_response(res).body

    async def __aenter__(self) -> 'PocketIcClient':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.tear_down()
