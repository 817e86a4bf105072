"""Chain configuration for the networks an action may target."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UnsupportedChainError


@dataclass(frozen=True)
class Chain:
    key: str
    id: int
    name: str
    rpc_url: str
    testnet: bool = False


AVALANCHE_FUJI = Chain(
    key="fuji",
    id=43113,
    name="Avalanche Fuji",
    rpc_url="https://api.avax-test.network/ext/bc/C/rpc",
    testnet=True,
)
AVALANCHE = Chain(
    key="avalanche",
    id=43114,
    name="Avalanche",
    rpc_url="https://api.avax.network/ext/bc/C/rpc",
)
CELO_ALFAJORES = Chain(
    key="alfajores",
    id=44787,
    name="Alfajores",
    rpc_url="https://alfajores-forno.celo-testnet.org",
    testnet=True,
)
CELO = Chain(
    key="celo",
    id=42220,
    name="Celo",
    rpc_url="https://forno.celo.org",
)
MONAD_TESTNET = Chain(
    key="monad-testnet",
    id=10143,
    name="Monad Testnet",
    rpc_url="https://testnet-rpc.monad.xyz",
    testnet=True,
)

SUPPORTED_CHAINS: dict[str, Chain] = {
    chain.key: chain
    for chain in (AVALANCHE_FUJI, AVALANCHE, CELO_ALFAJORES, CELO, MONAD_TESTNET)
}


def get_chain(key: str) -> Chain:
    """Resolve a chain key such as ``"fuji"``.

    Raises:
        UnsupportedChainError: If the key is not in SUPPORTED_CHAINS
    """
    try:
        return SUPPORTED_CHAINS[key]
    except KeyError:
        raise UnsupportedChainError(key) from None
