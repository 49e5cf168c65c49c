"""
Deployments the winners run can target.

Contract manifests are pinned to a commit of pt-v5-mainnet so that a
network's addresses never change underneath a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import NetworkNotFoundError

MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"


@dataclass(frozen=True)
class NetworkProfile:
    name: str
    chain_id: int
    prize_pool_address: str
    contract_json_url: str
    subgraph_url: str
    rpc_env_var: str
    multicall_address: Optional[str] = None


_PROFILES = (
    NetworkProfile(
        name="optimism-mainnet",
        chain_id=10,
        prize_pool_address="0xf35fe10ffd0a9672d0095c435fd8767a7fe29b55",
        contract_json_url=(
            "https://raw.githubusercontent.com/GenerationSoftware/pt-v5-mainnet/"
            "396f04daedc5a38935460ddf47d2f10e9ac1fec6/deployments/optimism/contracts.json"
        ),
        subgraph_url="https://api.studio.thegraph.com/query/63100/pt-v5-optimism/version/latest/graphql",
        rpc_env_var="OPTIMISM_MAINNET_RPC_URL",
    ),
    NetworkProfile(
        name="base-mainnet",
        chain_id=8453,
        prize_pool_address="0x45b2010d8A4f08b53c9fa7544C51dFd9733732cb",
        contract_json_url=(
            "https://raw.githubusercontent.com/GenerationSoftware/pt-v5-mainnet/"
            "bc84c3f5e1d9703372ae7f9baf584bab42f47b27/deployments/base/contracts.json"
        ),
        subgraph_url=(
            "https://subgraph.satsuma-prod.com/17063947abe2/"
            "g9-software-inc--666267/pt-v5-base/version/v0.0.1/api"
        ),
        rpc_env_var="BASE_MAINNET_RPC_URL",
    ),
    NetworkProfile(
        name="gnosis-mainnet",
        chain_id=100,
        prize_pool_address="0x0c08c2999e1a14569554eddbcda9da5e1918120f",
        contract_json_url=(
            "https://raw.githubusercontent.com/GenerationSoftware/pt-v5-mainnet/"
            "196aa20f4a0b3e651d0504ffeb0e1b9a08c7ccb6/deployments/gnosis/contracts.json"
        ),
        subgraph_url="https://api.studio.thegraph.com/query/63100/pt-v5-gnosis/version/latest/graphql",
        rpc_env_var="GNOSIS_MAINNET_RPC_URL",
        multicall_address=MULTICALL3_ADDRESS,
    ),
    NetworkProfile(
        name="world-mainnet",
        chain_id=480,
        prize_pool_address="0x99ffb0a6c0cd543861c8de84dd40e059fd867dcf",
        contract_json_url=(
            "https://raw.githubusercontent.com/GenerationSoftware/pt-v5-mainnet/"
            "8e1432b70c1f135966c1b70917675cd586dda7be/deployments/world/contracts.json"
        ),
        subgraph_url=(
            "https://api.goldsky.com/api/public/project_cm3xb1e8iup5601yx9mt5caat/"
            "subgraphs/pt-v5-world/v0.0.1/gn"
        ),
        rpc_env_var="WORLD_MAINNET_RPC_URL",
        multicall_address=MULTICALL3_ADDRESS,
    ),
)

NETWORKS: Dict[str, NetworkProfile] = {p.name: p for p in _PROFILES}


def available_networks() -> List[str]:
    return list(NETWORKS)


def resolve_network(name: Optional[str]) -> NetworkProfile:
    if not name or name not in NETWORKS:
        raise NetworkNotFoundError(name, available_networks())
    return NETWORKS[name]
