"""
Transaction Builder - Encode contract calls as unsigned transactions.

The output is an RFC 8785 canonical JSON object carrying to/data/value/chainId.
Nonce, gas and fee fields are left for the signing wallet to fill in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import rfc8785
from eth_abi import encode
from eth_hash.auto import keccak

from .abi import find_function, function_signature
from .chains import Chain


@dataclass(frozen=True)
class TransactionCall:
    to: str
    abi: list[dict[str, Any]] = field(repr=False)
    function_name: str
    args: list[Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "to": self.to,
            "abi": self.abi,
            "functionName": self.function_name,
            "args": list(self.args),
        }


def to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format."""
    addr = address.lower().replace("0x", "")
    if len(addr) != 40 or any(c not in "0123456789abcdef" for c in addr):
        raise ValueError(f"Invalid address: {address!r}")
    addr_hash = keccak(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


def function_selector(entry: dict[str, Any]) -> bytes:
    # Keccak-256, not NIST SHA3-256
    return keccak(function_signature(entry).encode("utf-8"))[:4]


def encode_call(abi: list[dict[str, Any]], function_name: str, args: list[Any]) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function to call
        args: Function arguments, in ABI input order

    Returns:
        0x-prefixed hex encoded calldata

    Raises:
        ValueError: If the function is missing or the argument count is wrong
    """
    func = find_function(abi, function_name)
    input_types = [inp["type"] for inp in func.get("inputs", [])]

    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} args, got {len(args)}"
        )

    encoded_args = encode(input_types, args) if args else b""
    return "0x" + function_selector(func).hex() + encoded_args.hex()


def build_unsigned_tx(call: TransactionCall, chain: Chain, value: int = 0) -> dict[str, Any]:
    """Build the unsigned transaction dict for ``call`` on ``chain``."""
    return {
        "to": to_checksum_address(call.to),
        "data": encode_call(call.abi, call.function_name, call.args),
        "value": hex(value),
        "chainId": chain.id,
    }


def serialize_transaction(call: TransactionCall, chain: Chain) -> str:
    """Serialize ``call`` as canonical JSON ready for a wallet to sign."""
    return rfc8785.dumps(build_unsigned_tx(call, chain)).decode("utf-8")
