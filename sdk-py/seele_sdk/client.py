from typing import Any, Callable, List, Optional
from dataclasses import dataclass, asdict

from loguru import logger

from . import mappers
from .config import settings
from .errors import ConsistencyError, DecodeError
from .transport import HttpTransport
from .types import BlockInfo, CurrentBlock, PeerInfo, Receipt, Transaction

Transport = Callable[[str, Optional[list]], Any]

LATEST_HEIGHT = -1


@dataclass
class GetBlockByHeightRequest:
    height: int
    fullTx: bool

    def to_params(self) -> list:
        return [asdict(self)]


class SeeleClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[Transport] = None,
    ):
        self.base_url = (base_url or settings.rpc_url).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.rpc_timeout
        self._owns_transport = transport is None
        self.transport = transport or HttpTransport(self.base_url, self.timeout)

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "SeeleClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _decode(self, method: str, mapper: Callable[..., Any], *args: Any) -> Any:
        """Run a mapper, logging decode failures before they propagate."""
        try:
            record = mapper(*args, method=method)
        except (DecodeError, ConsistencyError) as e:
            logger.warning(f"Failed to decode {method} result: {e}")
            raise
        logger.debug(f"Decoded {method} result into {type(record).__name__}")
        return record

    # Blocks
    def current_block(self) -> CurrentBlock:
        request = GetBlockByHeightRequest(height=LATEST_HEIGHT, fullTx=True)
        method = mappers.GET_BLOCK_BY_HEIGHT
        result = self.transport(method, request.to_params())
        return self._decode(method, mappers.map_current_block, result)

    def get_block_by_height(self, height: int, full_tx: bool = False) -> BlockInfo:
        if height < 0:
            raise ValueError(f"block height must be non-negative, got {height}")
        request = GetBlockByHeightRequest(height=height, fullTx=full_tx)
        method = mappers.GET_BLOCK_BY_HEIGHT
        result = self.transport(method, request.to_params())
        return self._decode(method, mappers.map_block, result, full_tx)

    # Network
    def get_peers_info(self) -> List[PeerInfo]:
        method = mappers.GET_PEERS_INFO
        result = self.transport(method, None)
        return self._decode(method, mappers.map_peers, result)

    # Accounts
    def get_balance(self, address: str) -> int:
        method = mappers.GET_BALANCE
        result = self.transport(method, [address])
        return self._decode(method, mappers.map_balance, result, address)

    # Transactions
    def get_receipt_by_tx_hash(self, tx_hash: str) -> Receipt:
        method = mappers.GET_RECEIPT_BY_TX_HASH
        result = self.transport(method, [tx_hash])
        return self._decode(method, mappers.map_receipt, result)

    def get_pending_transactions(self) -> List[Transaction]:
        method = mappers.GET_PENDING_TRANSACTIONS
        result = self.transport(method, None)
        return self._decode(method, mappers.map_transactions, result)
