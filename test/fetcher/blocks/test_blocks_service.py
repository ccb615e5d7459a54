from ethsnap.fetcher.blocks.service import BlocksService
from fixtures.w3 import LATEST_BLOCK, Web3Mock


def test_get_latest_block_number(blocks_service: BlocksService, w3_mock: Web3Mock):
    assert blocks_service.get_latest_block_number() == LATEST_BLOCK
    w3_mock.advance(3)
    assert blocks_service.get_latest_block_number() == LATEST_BLOCK + 3


def test_get_latest_block_fetches_resolved_height(
    blocks_service: BlocksService, w3_mock: Web3Mock
):
    number, raw = blocks_service.get_latest_block()
    assert number == LATEST_BLOCK
    assert int(raw["number"], 16) == LATEST_BLOCK
    assert w3_mock.calls == ["eth_blockNumber", "eth_getBlockByNumber"]


def test_get_raw_block_embeds_transactions(blocks_service: BlocksService):
    raw = blocks_service.get_raw_block(LATEST_BLOCK)
    assert isinstance(raw["transactions"][0], dict)

    raw = blocks_service.get_raw_block(LATEST_BLOCK, full_transactions=False)
    assert isinstance(raw["transactions"][0], str)


def test_get_latest_block_missing(blocks_service: BlocksService, w3_mock: Web3Mock):
    w3_mock.missing_blocks.add(LATEST_BLOCK)
    number, raw = blocks_service.get_latest_block()
    assert number == LATEST_BLOCK
    assert raw is None
