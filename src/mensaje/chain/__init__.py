"""
Chain - On-chain description layer for the mensaje action.

Provides chain configuration, ABI loading and unsigned transaction
serialization for the MessageStore contract.

Nothing here talks to a node: payloads are built and handed to the
client wallet, which fills in nonce and gas, signs and broadcasts.
"""
