import uuid

import pytest

from surfpool.cloud import (
    CloudStartCommand,
    CreateNetworkRequest,
    block_production_choices,
    mode_from_index,
    parse_block_production_mode,
)
from surfpool.config import DEFAULT_RPC_URL, BlockProductionMode


def test_choices_match_modes_in_order():
    choices = block_production_choices()
    assert choices == [
        "Produce blocks every 400ms",
        "Only produce blocks when transactions are received",
        "Full manual control (via RPC methods / cloud.txtx.run)",
    ]


def test_choices_returns_fresh_list():
    first = block_production_choices()
    first.clear()
    assert len(block_production_choices()) == 3


@pytest.mark.parametrize(
    "index, mode",
    [
        (0, BlockProductionMode.CLOCK),
        (1, BlockProductionMode.TRANSACTION),
        (2, BlockProductionMode.MANUAL),
    ],
)
def test_mode_from_index(index, mode):
    assert mode_from_index(index) is mode


@pytest.mark.parametrize("index", [3, 10, -1])
def test_mode_from_index_rejects_out_of_range(index):
    with pytest.raises(ValueError, match=f"invalid block production mode index: {index}"):
        mode_from_index(index)


@pytest.mark.parametrize("mode", list(BlockProductionMode))
def test_parse_round_trips_display(mode):
    assert parse_block_production_mode(str(mode)) is mode


@pytest.mark.parametrize("value", ["Clock", "slow", ""])
def test_parse_rejects_unknown(value):
    with pytest.raises(ValueError, match="invalid value"):
        parse_block_production_mode(value)


def test_cloud_start_defaults():
    command = CloudStartCommand()
    assert command.datasource_rpc_url == DEFAULT_RPC_URL
    assert command.block_production_mode is None
    assert command.name is None


def test_cloud_start_converts_mode_string():
    command = CloudStartCommand(block_production_mode="transaction")
    assert command.block_production_mode is BlockProductionMode.TRANSACTION


def test_cloud_start_rejects_bad_mode():
    with pytest.raises(ValueError):
        CloudStartCommand(block_production_mode="never")


def test_request_to_dict_carries_fields():
    workspace_id = uuid.uuid4()
    request = CreateNetworkRequest(
        workspace_id, "my-net", None, DEFAULT_RPC_URL, BlockProductionMode.MANUAL
    )
    payload = request.to_dict()
    assert payload["workspace_id"] == str(workspace_id)
    assert payload["name"] == "my-net"
    assert payload["description"] is None
    assert payload["datasource_rpc_url"] == DEFAULT_RPC_URL
    assert parse_block_production_mode(payload["block_production_mode"]) is BlockProductionMode.MANUAL


def test_request_accepts_string_uuid():
    workspace_id = uuid.uuid4()
    request = CreateNetworkRequest(
        str(workspace_id), "net", "desc", DEFAULT_RPC_URL, BlockProductionMode.CLOCK
    )
    assert request.workspace_id == workspace_id
    assert request.to_dict()["description"] == "desc"


def test_request_rejects_bad_uuid():
    with pytest.raises(ValueError):
        CreateNetworkRequest("not-a-uuid", "net", None, DEFAULT_RPC_URL, BlockProductionMode.CLOCK)