"""Wire shapes of the node's JSON-RPC results, keyed by the node's own field names."""

from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .decode import BigInt, Int64, UInt64, WireBool, WireStr, none_as_empty


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


# result data struct:
# {
#   "from": "0x4c10f2cd2159bb432094e3be7e17904c2b4aeb21",
#   "hash": "0x6524d63226943b2c0cafca124983faa2c64dc2bacf27aab22f6b3ebc67404c39",
#   "payload": "", "timestamp": 0, "to": "0x0ea2...", "accountNonce": 14,
#   "amount": 10000, "fee": 1
# }
class WireTransaction(WireModel):
    hash: WireStr
    from_addr: WireStr = Field(alias="from")
    to_addr: WireStr = Field(alias="to")
    amount: BigInt
    account_nonce: UInt64 = Field(alias="accountNonce")
    payload: WireStr
    timestamp: UInt64
    fee: BigInt


TransactionList = Annotated[List[WireTransaction], BeforeValidator(none_as_empty)]


class WireBlockHeader(WireModel):
    height: UInt64
    hash: WireStr
    parent_hash: WireStr = Field(alias="parentHash")
    nonce: UInt64
    state_hash: WireStr = Field(alias="stateHash")
    tx_hash: WireStr = Field(alias="txHash")
    creator: WireStr
    timestamp: UInt64
    difficulty: BigInt
    total_difficulty: BigInt = Field(alias="totalDifficulty")


class WireFullBlock(WireBlockHeader):
    """A block fetched with full detail; its transaction list must be present."""

    transactions: TransactionList


class WireNetwork(WireModel):
    local_address: WireStr = Field(alias="localAddress")
    remote_address: WireStr = Field(alias="remoteAddress")


# result data struct:
# {
#   "id": "0x0ea2a45ab5a909c309439b0e004c61b7b2a3e831",
#   "caps": ["lightSeele_1/1", "lightSeele_2/1", "seele/1"],
#   "network": {"localAddress": "127.0.0.1:8057", "remoteAddress": "127.0.0.1:54337"},
#   "protocols": {...},
#   "shard": 2
# }
class WirePeer(WireModel):
    id: WireStr
    caps: Annotated[List[WireStr], BeforeValidator(none_as_empty)] = Field(default_factory=list)
    network: WireNetwork
    shard: Int64


PeerList = Annotated[List[WirePeer], BeforeValidator(none_as_empty)]


class WireBalance(WireModel):
    account: WireStr = Field(alias="Account")
    balance: BigInt = Field(alias="Balance")


class WireReceipt(WireModel):
    result: WireStr
    post_state: WireStr = Field(alias="poststate")
    tx_hash: WireStr = Field(alias="txhash")
    contract: WireStr
    failed: WireBool
    total_fee: BigInt = Field(alias="totalFee")
    used_gas: BigInt = Field(alias="usedGas")
