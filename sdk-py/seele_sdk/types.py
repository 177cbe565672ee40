from typing import Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transaction:
    hash: str
    from_addr: str
    to_addr: str
    amount: int
    account_nonce: int
    payload: str
    timestamp: int
    fee: int


@dataclass(frozen=True)
class BlockInfo:
    height: int
    hash: str
    parent_hash: str
    nonce: int
    state_hash: str
    tx_hash: str
    creator: str
    timestamp: int
    difficulty: int
    total_difficulty: int
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CurrentBlock:
    head_hash: str
    height: int
    timestamp: int
    difficulty: int
    creator: str
    tx_count: int


@dataclass(frozen=True)
class Receipt:
    result: str
    post_state: str
    tx_hash: str
    contract: str
    failed: bool
    total_fee: int
    used_gas: int

    @property
    def has_contract(self) -> bool:
        """True when the receipt names a created contract address."""
        digits = self.contract[2:] if self.contract.startswith("0x") else self.contract
        return bool(digits.strip("0"))


@dataclass(frozen=True)
class PeerInfo:
    id: str
    caps: Tuple[str, ...]
    local_address: str
    remote_address: str
    shard: int
