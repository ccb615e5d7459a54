import pytest
from ethsnap.fetcher.errors import RpcError
from ethsnap.fetcher.transactions import CONTRACT_CREATION
from ethsnap.snapshot.builder import SnapshotBuilder
from fixtures.general import make_builder
from fixtures.w3 import LATEST_BLOCK, Web3Mock, tx_hash


def test_build(snapshot_builder: SnapshotBuilder, w3_mock: Web3Mock):
    update = snapshot_builder.build()
    assert update.block.number == LATEST_BLOCK
    assert update.block.tx_count == 20
    assert len(update.transactions) == 15
    assert update.transactions[0].to_address == CONTRACT_CREATION
    assert update.network_info.block_number == LATEST_BLOCK
    assert update.network_info.gas_price == "23.45"
    assert update.network_info.tx_count == 20
    assert update.gas_price_point.block_number == LATEST_BLOCK
    assert update.gas_price_point.gas_price == 23.45
    assert update.gas_price_point.timestamp == update.block.timestamp
    assert update.mempool_stats.avg_gas_price == "23.45"
    assert 10_000 <= update.mempool_stats.pending_count < 60_000
    # one gas price request per cycle, transactions come embedded
    assert w3_mock.calls == ["eth_blockNumber", "eth_getBlockByNumber", "eth_gasPrice"]


def test_build_missing_block(snapshot_builder: SnapshotBuilder, w3_mock: Web3Mock):
    w3_mock.missing_blocks.add(LATEST_BLOCK)
    assert snapshot_builder.build() is None
    assert w3_mock.calls_of("eth_gasPrice") == 0


def test_build_one_failed_transaction(snapshot_builder: SnapshotBuilder, w3_mock: Web3Mock):
    w3_mock.embed_transactions = False
    w3_mock.failing_transactions.add(tx_hash(LATEST_BLOCK, 7))
    update = snapshot_builder.build()
    assert len(update.transactions) == 14
    assert w3_mock.calls_of("eth_getTransactionByHash") == 15
    assert w3_mock.calls_of("eth_gasPrice") == 1


def test_build_respects_tx_limit(w3_mock: Web3Mock):
    update = make_builder(w3_mock, tx_limit=3).build()
    assert len(update.transactions) == 3
    assert update.network_info.tx_count == 20


def test_build_unreachable(snapshot_builder: SnapshotBuilder, w3_mock: Web3Mock):
    w3_mock.unreachable = True
    with pytest.raises(ConnectionError):
        snapshot_builder.build()


def test_build_gas_price_error(snapshot_builder: SnapshotBuilder, w3_mock: Web3Mock):
    w3_mock.errors["eth_gasPrice"] = {"code": -32000, "message": "boom"}
    with pytest.raises(RpcError):
        snapshot_builder.build()
