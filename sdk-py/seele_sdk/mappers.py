"""
Response mappers, one per node RPC method.

Each mapper is a pure function of the raw result: it validates the wire shape
and builds the domain record. When several fields are bad, the first one in
wire order is reported.
"""

from typing import Any, List

from pydantic import TypeAdapter

from .decode import validate
from .errors import ConsistencyError
from .types import BlockInfo, CurrentBlock, PeerInfo, Receipt, Transaction
from .wire import (
    PeerList,
    TransactionList,
    WireBalance,
    WireBlockHeader,
    WireFullBlock,
    WirePeer,
    WireReceipt,
    WireTransaction,
)

GET_BLOCK_BY_HEIGHT = "seele.GetBlockByHeight"
GET_PEERS_INFO = "network_getPeersInfo"
GET_BALANCE = "seele_getBalance"
GET_RECEIPT_BY_TX_HASH = "txpool_getReceiptByTxHash"
GET_PENDING_TRANSACTIONS = "debug_getPendingTransactions"

_BLOCK_HEADER = TypeAdapter(WireBlockHeader)
_FULL_BLOCK = TypeAdapter(WireFullBlock)
_TRANSACTIONS = TypeAdapter(TransactionList)
_PEERS = TypeAdapter(PeerList)
_BALANCE = TypeAdapter(WireBalance)
_RECEIPT = TypeAdapter(WireReceipt)


def _transaction(tx: WireTransaction) -> Transaction:
    return Transaction(
        hash=tx.hash,
        from_addr=tx.from_addr,
        to_addr=tx.to_addr,
        amount=tx.amount,
        account_nonce=tx.account_nonce,
        payload=tx.payload,
        timestamp=tx.timestamp,
        fee=tx.fee,
    )


def _peer(peer: WirePeer) -> PeerInfo:
    return PeerInfo(
        id=peer.id,
        caps=tuple(peer.caps),
        local_address=peer.network.local_address,
        remote_address=peer.network.remote_address,
        shard=peer.shard,
    )


def map_transactions(raw: Any, method: str = GET_PENDING_TRANSACTIONS) -> List[Transaction]:
    return [_transaction(tx) for tx in validate(_TRANSACTIONS, raw, method)]


def map_block(raw: Any, full_tx: bool, method: str = GET_BLOCK_BY_HEIGHT) -> BlockInfo:
    """Map a block object; transactions are only read when ``full_tx`` was requested."""
    if full_tx:
        block = validate(_FULL_BLOCK, raw, method)
        transactions = tuple(_transaction(tx) for tx in block.transactions)
    else:
        block = validate(_BLOCK_HEADER, raw, method)
        transactions = ()

    return BlockInfo(
        height=block.height,
        hash=block.hash,
        parent_hash=block.parent_hash,
        nonce=block.nonce,
        state_hash=block.state_hash,
        tx_hash=block.tx_hash,
        creator=block.creator,
        timestamp=block.timestamp,
        difficulty=block.difficulty,
        total_difficulty=block.total_difficulty,
        transactions=transactions,
    )


def map_current_block(raw: Any, method: str = GET_BLOCK_BY_HEIGHT) -> CurrentBlock:
    block = validate(_FULL_BLOCK, raw, method)
    return CurrentBlock(
        head_hash=block.hash,
        height=block.height,
        timestamp=block.timestamp,
        difficulty=block.difficulty,
        creator=block.creator,
        tx_count=len(block.transactions),
    )


def map_peers(raw: Any, method: str = GET_PEERS_INFO) -> List[PeerInfo]:
    return [_peer(peer) for peer in validate(_PEERS, raw, method)]


def map_balance(raw: Any, address: str, method: str = GET_BALANCE) -> int:
    """Return the balance, checking the node answered for ``address``."""
    result = validate(_BALANCE, raw, method)
    if result.account != address:
        raise ConsistencyError(method, "Account", address, result.account)
    return result.balance


def map_receipt(raw: Any, method: str = GET_RECEIPT_BY_TX_HASH) -> Receipt:
    receipt = validate(_RECEIPT, raw, method)
    return Receipt(
        result=receipt.result,
        post_state=receipt.post_state,
        tx_hash=receipt.tx_hash,
        contract=receipt.contract,
        failed=receipt.failed,
        total_fee=receipt.total_fee,
        used_gas=receipt.used_gas,
    )
