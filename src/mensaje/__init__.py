__version__ = "0.1.0"

__all__ = [
    # Action
    "MESSAGE_PARAM",
    "build_descriptor",
    "build_store_message_call",
    "build_execution_response",
    # Timestamp
    "MAX_OFFSET",
    "compute_offset",
    "compute_timestamp",
    # Models
    "ActionDescriptor",
    "ActionSpec",
    "ParamSpec",
    "ExecutionResponse",
    "create_metadata",
    # Chain
    "Chain",
    "get_chain",
    "TransactionCall",
    "encode_call",
    "serialize_transaction",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "MensajeError",
    "MissingParameterError",
    "UnsupportedChainError",
    "MetadataValidationError",
    "SchemaValidationError",
]

from .errors import MensajeError, MissingParameterError, UnsupportedChainError
from .timestamp import MAX_OFFSET, compute_offset, compute_timestamp
from .chain.chains import Chain, get_chain
from .chain.tx import TransactionCall, encode_call, serialize_transaction
from .spec.models import (
    ActionDescriptor,
    ActionSpec,
    ExecutionResponse,
    MetadataValidationError,
    ParamSpec,
    create_metadata,
)
from .spec.schemas import SchemaValidationError
from .config import Settings, get_settings
from .action import (
    MESSAGE_PARAM,
    build_descriptor,
    build_execution_response,
    build_store_message_call,
)
