from .client import SeeleClient, GetBlockByHeightRequest
from .errors import (
    ConsistencyError,
    DecodeError,
    FieldMissing,
    FieldTypeMismatch,
    NumericFormat,
    SeeleError,
    TransportError,
)
from .transport import HttpTransport
from .types import BlockInfo, CurrentBlock, PeerInfo, Receipt, Transaction

__all__ = [
    "SeeleClient",
    "GetBlockByHeightRequest",
    "HttpTransport",
    "BlockInfo",
    "CurrentBlock",
    "PeerInfo",
    "Receipt",
    "Transaction",
    "SeeleError",
    "TransportError",
    "DecodeError",
    "FieldMissing",
    "FieldTypeMismatch",
    "NumericFormat",
    "ConsistencyError",
]
