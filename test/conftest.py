from fixtures.w3 import w3_mock
from fixtures.general import (
    clock,
    blocks_service,
    transactions_service,
    gas_service,
    snapshot_builder,
    snapshot_cache,
)
