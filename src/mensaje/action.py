"""
The "store a message" action.

Builds the metadata a client renders as a one-field form, and turns the
submitted message into an unsigned storeMessage transaction.
"""

from __future__ import annotations

import logging
from typing import Optional

from .chain.abi import message_store_abi
from .chain.tx import TransactionCall, serialize_transaction
from .config import Settings
from .errors import MissingParameterError
from .spec.models import ActionDescriptor, ActionSpec, ExecutionResponse, ParamSpec
from .timestamp import compute_timestamp

logger = logging.getLogger(__name__)

# Form field name and POST query key.
MESSAGE_PARAM = "mensaje"

ACTION_PATH = "/api/example"
STORE_FUNCTION = "storeMessage"

SITE_URL = "https://sherry.social"
ICON_URL = "https://avatars.githubusercontent.com/u/117962315"
TITLE = "Mensaje con Timestamp"
DESCRIPTION = "Almacena un mensaje con un timestamp optimizado calculado por nuestro algoritmo"
ACTION_LABEL = "Almacenar Mensaje"
ACTION_DESCRIPTION = (
    "Almacena tu mensaje con un timestamp personalizado calculado para almacenamiento óptimo"
)
PARAM_LABEL = "¡Tu Mensaje Hermano!"
PARAM_DESCRIPTION = "Ingresa el mensaje que quieres almacenar en la blockchain"


def base_url_from_headers(
    host: Optional[str],
    protocol: Optional[str],
    default_host: str = "localhost:3000",
) -> str:
    return f"{protocol or 'http'}://{host or default_host}"


def build_descriptor(base_url: str, chain_key: str = "fuji") -> ActionDescriptor:
    """Build the action descriptor served at ``base_url``."""
    message_param = ParamSpec(
        name=MESSAGE_PARAM,
        label=PARAM_LABEL,
        type="text",
        required=True,
        description=PARAM_DESCRIPTION,
    )
    action = ActionSpec(
        type="dynamic",
        label=ACTION_LABEL,
        description=ACTION_DESCRIPTION,
        chains={"source": chain_key},
        path=ACTION_PATH,
        params=(message_param,),
    )
    return ActionDescriptor(
        url=SITE_URL,
        icon=ICON_URL,
        title=TITLE,
        base_url=base_url,
        description=DESCRIPTION,
        actions=(action,),
    )


def build_store_message_call(
    message: Optional[str],
    settings: Settings,
    now: Optional[int] = None,
) -> TransactionCall:
    """
    Build the storeMessage call for ``message``.

    Args:
        message: Submitted message text
        settings: Contract address and chain configuration
        now: Base Unix time for the timestamp (default: current time)

    Raises:
        MissingParameterError: If ``message`` is None or empty
    """
    if not message:
        raise MissingParameterError(MESSAGE_PARAM)

    timestamp = compute_timestamp(message, now=now)
    return TransactionCall(
        to=settings.contract_address,
        abi=message_store_abi(),
        function_name=STORE_FUNCTION,
        args=[message, timestamp],
    )


def build_execution_response(
    message: Optional[str],
    settings: Settings,
    now: Optional[int] = None,
) -> ExecutionResponse:
    call = build_store_message_call(message, settings, now=now)
    chain = settings.chain
    serialized = serialize_transaction(call, chain)
    logger.debug("Built %s call for %s on %s", call.function_name, call.to, chain.name)
    return ExecutionResponse(serialized_transaction=serialized, chain_id=chain.name)
