from __future__ import annotations

from typing import Any, Dict, Optional
import httpx

from .errors import RpcCheckError


class RpcClient:
    def __init__(
        self,
        rpc_url: str,
        timeout_s: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.client = httpx.Client(timeout=timeout_s, transport=transport)

    def close(self) -> None:
        self.client.close()

    def get_chain_id(self) -> int:
        """Returns the chain id reported by the endpoint (eth_chainId)."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "eth_chainId",
            "params": [],
        }
        data = self._post(payload)
        result = data.get("result")
        if not isinstance(result, str):
            raise RuntimeError(f"eth_chainId returned no result: {data}")
        return int(result, 16)

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        resp = self.client.post(self.rpc_url, json=payload)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise RuntimeError(f"Unexpected RPC response: {data!r}")
        if "error" in data:
            raise RuntimeError(f"RPC error: {data['error']}")
        return data


def check_chain_id(
    rpc_url: str,
    expected_chain_id: int,
    timeout_s: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """
    Confirms the RPC endpoint serves the expected chain.
    Raises RpcCheckError on mismatch or when the endpoint cannot be queried.
    """
    rpc = RpcClient(rpc_url, timeout_s=timeout_s, transport=transport)
    try:
        chain_id = rpc.get_chain_id()
    except (httpx.HTTPError, RuntimeError, ValueError) as e:
        raise RpcCheckError(f"Could not query chain id from RPC: {e}") from e
    finally:
        rpc.close()

    if chain_id != expected_chain_id:
        raise RpcCheckError(
            f"RPC chain id mismatch: endpoint={chain_id} expected={expected_chain_id}"
        )
    return chain_id
