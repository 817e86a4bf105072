"""Configuration loaded from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from .chain.chains import Chain, get_chain

DEFAULT_CONTRACT_ADDRESS = "0x26480A86d47096Cf19F1be6129546aD715Ca68D9"
DEFAULT_CHAIN = "fuji"
DEFAULT_HOST = "localhost:3000"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    contract_address: str = DEFAULT_CONTRACT_ADDRESS
    chain_key: str = DEFAULT_CHAIN
    default_host: str = DEFAULT_HOST
    bind_host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def chain(self) -> Chain:
        return get_chain(self.chain_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from MENSAJE_* environment variables."""
        load_dotenv()
        return cls(
            contract_address=os.getenv("MENSAJE_CONTRACT_ADDRESS", DEFAULT_CONTRACT_ADDRESS),
            chain_key=os.getenv("MENSAJE_CHAIN", DEFAULT_CHAIN).strip().lower(),
            default_host=os.getenv("MENSAJE_DEFAULT_HOST", DEFAULT_HOST),
            bind_host=os.getenv("MENSAJE_HOST", "0.0.0.0"),
            port=int(os.getenv("MENSAJE_PORT", "3000")),
            log_level=os.getenv("MENSAJE_LOG_LEVEL", "INFO").strip().upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
