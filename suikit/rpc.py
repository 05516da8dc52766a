"""A JSON-RPC 2.0 client over HTTP."""

from __future__ import annotations

import base64
import dataclasses
import enum
import itertools
import json
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import httpx

JSONRPC_VERSION = "2.0"


class NoResultError(Exception):
    """The server answered without a result and without an error."""

    def __init__(self, message: str = "no result in JSON-RPC response") -> None:
        super().__init__(message)


class JsonRpcError(Exception):
    """An error object returned by the server."""

    def __init__(self, code: int, message: str = "", data: Any = None) -> None:
        super().__init__(code, message, data)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        if not self.message:
            return f"json-rpc error {self.code}"
        return self.message


class HttpError(Exception):
    """The server answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, status: str, body: bytes = b"") -> None:
        super().__init__(status_code, status, body)
        self.status_code = status_code
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if not self.body:
            return self.status
        return f"{self.status}: {self.body.decode('utf-8', 'replace')}"


@dataclass
class BatchElem:
    """One request of a batch; ``result`` or ``error`` is filled in by the call."""

    method: Any
    args: Optional[Sequence[Any]] = None
    result: Any = None
    error: Optional[Exception] = None


def _jsonable(obj: Any) -> Any:
    to_json = getattr(obj, "to_json", None)
    if callable(to_json):
        return json.loads(to_json())
    if isinstance(obj, enum.Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serialisable")


def _error_from(payload: Any) -> JsonRpcError:
    if not isinstance(payload, dict):
        return JsonRpcError(0, str(payload))
    return JsonRpcError(
        int(payload.get("code", 0)), payload.get("message") or "", payload.get("data")
    )


def _unpack(reply: Any) -> Any:
    if not isinstance(reply, dict):
        raise ValueError("JSON-RPC response is not an object")
    if reply.get("error") is not None:
        raise _error_from(reply["error"])
    if "result" not in reply:
        raise NoResultError()
    return reply["result"]


def _default_http_client() -> httpx.Client:
    return httpx.Client(
        timeout=30.0,
        limits=httpx.Limits(max_keepalive_connections=3, keepalive_expiry=30.0),
    )


class RpcClient:
    """Sends JSON-RPC requests to one endpoint."""

    def __init__(self, rpc_url: str, http_client: Optional[httpx.Client] = None) -> None:
        self.rpc_url = rpc_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else _default_http_client()
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()

    def __enter__(self) -> RpcClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def _message(self, method: Any, args: Optional[Iterable[Any]]) -> dict:
        message = {"jsonrpc": JSONRPC_VERSION, "id": self._next_id(), "method": str(method)}
        if args is not None:
            message["params"] = list(args)
        return message

    def _post(self, payload: Any) -> Any:
        body = json.dumps(payload, default=_jsonable).encode("utf-8")
        response = self._http.post(
            self.rpc_url, content=body, headers={"Content-Type": "application/json"}
        )
        if not 200 <= response.status_code < 300:
            raise HttpError(
                response.status_code,
                f"{response.status_code} {response.reason_phrase}",
                response.content,
            )
        return response.json()

    def call(self, method: Any, *args: Any) -> Any:
        """Call ``method`` with positional ``args`` and return the decoded result."""
        message = self._message(method, args if args else None)
        return _unpack(self._post(message))

    def batch_call(self, elements: Sequence[BatchElem]) -> None:
        """Send all elements as one batch, filling in each one's result or error."""
        messages = [self._message(elem.method, elem.args) for elem in elements]
        replies = self._post(messages)
        if not isinstance(replies, list):
            raise ValueError("JSON-RPC batch response is not an array")
        for elem, reply in zip(elements, replies):
            try:
                elem.result = _unpack(reply)
                elem.error = None
            except (JsonRpcError, NoResultError, ValueError) as exc:
                elem.result = None
                elem.error = exc


def dial(rpc_url: str) -> RpcClient:
    """Create a client for ``rpc_url`` with its own HTTP connection pool."""
    return RpcClient(rpc_url)