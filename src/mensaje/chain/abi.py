"""
ABI Loader - Loads contract ABIs bundled with the package.

Artifacts live in mensaje/chain/contracts/<Name>.json and follow the
Foundry/Hardhat layout: a JSON object with an "abi" list.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

CONTRACTS_DIR = Path(__file__).resolve().parent / "contracts"

MESSAGE_STORE = "MessageStore"


@lru_cache(maxsize=16)
def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """
    Load ABI for a bundled contract.

    Args:
        contract_name: Contract name (e.g., "MessageStore")

    Returns:
        ABI as a list of dicts

    Raises:
        FileNotFoundError: If the artifact is not bundled
    """
    abi_path = CONTRACTS_DIR / f"{contract_name}.json"

    if not abi_path.exists():
        raise FileNotFoundError(f"ABI not found: {abi_path}")

    with abi_path.open("r", encoding="utf-8") as f:
        artifact = json.load(f)

    return artifact["abi"]


def message_store_abi() -> list[dict[str, Any]]:
    """Load MessageStore ABI."""
    return load_abi(MESSAGE_STORE)


def find_function(abi: list[dict[str, Any]], function_name: str) -> dict[str, Any]:
    """Return the ABI entry for ``function_name``.

    Raises:
        ValueError: If the ABI has no function with that name
    """
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def function_signature(entry: dict[str, Any]) -> str:
    """Canonical signature, e.g. ``storeMessage(string,uint256)``."""
    input_types = [inp["type"] for inp in entry.get("inputs", [])]
    return f"{entry['name']}({','.join(input_types)})"
