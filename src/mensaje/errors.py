from __future__ import annotations


class MensajeError(Exception):
    pass


class MissingParameterError(MensajeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required parameter: {name}")
        self.name = name


class UnsupportedChainError(MensajeError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unsupported chain: {self.key!r}"
