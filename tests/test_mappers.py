from __future__ import annotations

import unittest
from decimal import Decimal

from seele_sdk import mappers
from seele_sdk.errors import ConsistencyError, FieldMissing, FieldTypeMismatch, NumericFormat
from seele_sdk.types import Receipt, Transaction


def _tx(**overrides: object) -> dict:
    tx = {
        "hash": "0x05",
        "from": "0xaa",
        "to": "0xbb",
        "amount": 10000.0,
        "accountNonce": 1.0,
        "payload": "",
        "timestamp": 999.0,
        "fee": 1.0,
    }
    tx.update(overrides)
    return tx


def _block(**overrides: object) -> dict:
    block = {
        "height": 10.0,
        "hash": "0x01",
        "parentHash": "0x00",
        "nonce": 5.0,
        "stateHash": "0x02",
        "txHash": "0x03",
        "creator": "0x04",
        "timestamp": 1000.0,
        "difficulty": 50.0,
        "totalDifficulty": 500.0,
        "transactions": [_tx()],
    }
    block.update(overrides)
    return block


class BlockMapperTest(unittest.TestCase):
    def test_full_block(self) -> None:
        block = mappers.map_block(_block(), full_tx=True)
        self.assertEqual(block.height, 10)
        self.assertEqual(block.hash, "0x01")
        self.assertEqual(block.parent_hash, "0x00")
        self.assertEqual(block.nonce, 5)
        self.assertEqual(block.state_hash, "0x02")
        self.assertEqual(block.tx_hash, "0x03")
        self.assertEqual(block.creator, "0x04")
        self.assertEqual(block.timestamp, 1000)
        self.assertEqual(block.difficulty, 50)
        self.assertEqual(block.total_difficulty, 500)
        self.assertEqual(len(block.transactions), 1)
        tx = block.transactions[0]
        self.assertEqual(tx.amount, 10000)
        self.assertIsInstance(tx.amount, int)
        self.assertEqual(
            tx,
            Transaction(
                hash="0x05",
                from_addr="0xaa",
                to_addr="0xbb",
                amount=10000,
                account_nonce=1,
                payload="",
                timestamp=999,
                fee=1,
            ),
        )

    def test_transaction_count_matches_raw(self) -> None:
        raw = _block(transactions=[_tx(hash=f"0x{i:02x}") for i in range(7)])
        block = mappers.map_block(raw, full_tx=True)
        self.assertEqual(len(block.transactions), 7)
        self.assertEqual([tx.hash for tx in block.transactions], [f"0x{i:02x}" for i in range(7)])

    def test_header_only_ignores_transactions(self) -> None:
        block = mappers.map_block(_block(transactions=[_tx(), {"junk": True}]), full_tx=False)
        self.assertEqual(block.transactions, ())
        block = mappers.map_block({k: v for k, v in _block().items() if k != "transactions"}, full_tx=False)
        self.assertEqual(block.transactions, ())

    def test_full_detail_without_transactions_is_missing(self) -> None:
        raw = _block()
        del raw["transactions"]
        with self.assertRaises(FieldMissing) as ctx:
            mappers.map_block(raw, full_tx=True)
        self.assertEqual(ctx.exception.path, "transactions")

    def test_null_transactions_is_empty(self) -> None:
        block = mappers.map_block(_block(transactions=None), full_tx=True)
        self.assertEqual(block.transactions, ())

    def test_missing_hash(self) -> None:
        raw = _block()
        del raw["hash"]
        with self.assertRaises(FieldMissing) as ctx:
            mappers.map_block(raw, full_tx=True)
        self.assertEqual(ctx.exception.method, "seele.GetBlockByHeight")
        self.assertEqual(ctx.exception.path, "hash")

    def test_nested_transaction_error_path(self) -> None:
        raw = _block(transactions=[_tx(), _tx(amount=0.5)])
        with self.assertRaises(NumericFormat) as ctx:
            mappers.map_block(raw, full_tx=True)
        self.assertEqual(ctx.exception.path, "transactions[1].amount")

    def test_large_difficulty_is_exact(self) -> None:
        raw = _block(difficulty=Decimal("123456789012345678901"), totalDifficulty=float(2 ** 70))
        block = mappers.map_block(raw, full_tx=False)
        self.assertEqual(block.difficulty, 123456789012345678901)
        self.assertEqual(block.total_difficulty, 2 ** 70)

    def test_oversized_difficulty_is_rejected(self) -> None:
        raw = _block(difficulty=Decimal("1e20000000"))
        with self.assertRaises(NumericFormat) as ctx:
            mappers.map_block(raw, full_tx=False)
        self.assertEqual(ctx.exception.path, "difficulty")
        self.assertEqual(ctx.exception.reason, "out of range")

    def test_current_block(self) -> None:
        current = mappers.map_current_block(_block(transactions=[_tx(), _tx(hash="0x06")]))
        self.assertEqual(current.head_hash, "0x01")
        self.assertEqual(current.height, 10)
        self.assertEqual(current.timestamp, 1000)
        self.assertEqual(current.difficulty, 50)
        self.assertEqual(current.creator, "0x04")
        self.assertEqual(current.tx_count, 2)

    def test_result_must_be_object(self) -> None:
        with self.assertRaises(FieldTypeMismatch):
            mappers.map_block([], full_tx=True)


class PeerMapperTest(unittest.TestCase):
    PEER = {
        "id": "0x0ea2a45ab5a909c309439b0e004c61b7b2a3e831",
        "caps": ["lightSeele_1/1", "lightSeele_2/1", "seele/1"],
        "network": {"localAddress": "127.0.0.1:8057", "remoteAddress": "127.0.0.1:54337"},
        "protocols": {"seele": {"version": 1, "difficulty": 7.926036971e09}},
        "shard": 2.0,
    }

    def test_peer(self) -> None:
        (peer,) = mappers.map_peers([self.PEER])
        self.assertEqual(peer.id, "0x0ea2a45ab5a909c309439b0e004c61b7b2a3e831")
        self.assertEqual(set(peer.caps), {"seele/1", "lightSeele_1/1", "lightSeele_2/1"})
        self.assertEqual(peer.local_address, "127.0.0.1:8057")
        self.assertEqual(peer.remote_address, "127.0.0.1:54337")
        self.assertEqual(peer.shard, 2)

    def test_empty_and_null(self) -> None:
        self.assertEqual(mappers.map_peers([]), [])
        self.assertEqual(mappers.map_peers(None), [])

    def test_network_error_path(self) -> None:
        broken = dict(self.PEER, network={"localAddress": "127.0.0.1:8057"})
        with self.assertRaises(FieldMissing) as ctx:
            mappers.map_peers([self.PEER, broken])
        self.assertEqual(ctx.exception.method, "network_getPeersInfo")
        self.assertEqual(ctx.exception.path, "[1].network.remoteAddress")


class BalanceMapperTest(unittest.TestCase):
    def test_balance(self) -> None:
        raw = {"Account": "0x4c10", "Balance": 1.9975499e12}
        self.assertEqual(mappers.map_balance(raw, "0x4c10"), 1997549900000)

    def test_mismatched_account(self) -> None:
        with self.assertRaises(ConsistencyError) as ctx:
            mappers.map_balance({"Account": "0xdef", "Balance": 100}, "0xabc")
        self.assertEqual(ctx.exception.field, "Account")
        self.assertEqual(ctx.exception.expected, "0xabc")
        self.assertEqual(ctx.exception.actual, "0xdef")


class ReceiptMapperTest(unittest.TestCase):
    RAW = {
        "poststate": "0x9564",
        "result": "0x",
        "totalFee": 1.0,
        "txhash": "0x02c2",
        "usedGas": 0.0,
        "contract": "0x",
        "failed": False,
    }

    def test_receipt(self) -> None:
        receipt = mappers.map_receipt(self.RAW)
        self.assertEqual(
            receipt,
            Receipt(
                result="0x",
                post_state="0x9564",
                tx_hash="0x02c2",
                contract="0x",
                failed=False,
                total_fee=1,
                used_gas=0,
            ),
        )
        self.assertFalse(receipt.has_contract)

    def test_has_contract(self) -> None:
        receipt = mappers.map_receipt(dict(self.RAW, contract="0x00a1"))
        self.assertTrue(receipt.has_contract)
        receipt = mappers.map_receipt(dict(self.RAW, contract="0x0000"))
        self.assertFalse(receipt.has_contract)

    def test_failed_must_be_boolean(self) -> None:
        with self.assertRaises(FieldTypeMismatch) as ctx:
            mappers.map_receipt(dict(self.RAW, failed=0))
        self.assertEqual(ctx.exception.path, "failed")


class PendingMapperTest(unittest.TestCase):
    def test_pending(self) -> None:
        txs = mappers.map_transactions([_tx(accountNonce=14.0), _tx(accountNonce=15.0)])
        self.assertEqual([tx.account_nonce for tx in txs], [14, 15])

    def test_null_pool(self) -> None:
        self.assertEqual(mappers.map_transactions(None), [])

    def test_element_must_be_object(self) -> None:
        with self.assertRaises(FieldTypeMismatch) as ctx:
            mappers.map_transactions(["0x05"])
        self.assertEqual(ctx.exception.path, "[0]")
        self.assertEqual(ctx.exception.method, "debug_getPendingTransactions")


if __name__ == "__main__":
    unittest.main()
