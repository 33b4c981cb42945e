"""Options and request payloads for starting a hosted network."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from surfpool.config import DEFAULT_RPC_URL, BlockProductionMode

_MODES = (
    BlockProductionMode.CLOCK,
    BlockProductionMode.TRANSACTION,
    BlockProductionMode.MANUAL,
)

_CHOICES = (
    "Produce blocks every 400ms",
    "Only produce blocks when transactions are received",
    "Full manual control (via RPC methods / cloud.txtx.run)",
)


def block_production_choices() -> list[str]:
    """Return the prompt labels for each block production mode, in selection order."""
    return list(_CHOICES)


def mode_from_index(index: int) -> BlockProductionMode:
    """Return the block production mode selected at ``index`` of the choices."""
    if 0 <= index < len(_MODES):
        return _MODES[index]
    raise ValueError(f"invalid block production mode index: {index}")


def parse_block_production_mode(value: str) -> BlockProductionMode:
    """Parse a command-line block production mode name."""
    for mode in _MODES:
        if str(mode) == value:
            return mode
    possible = ", ".join(str(mode) for mode in _MODES)
    raise ValueError(f"invalid value '{value}' [possible values: {possible}]")


@dataclass
class CloudStartCommand:
    """Options of the command that starts a hosted network."""

    workspace_name: str | None = None
    name: str | None = None
    description: str | None = None
    datasource_rpc_url: str = DEFAULT_RPC_URL
    block_production_mode: BlockProductionMode | None = None

    def __post_init__(self) -> None:
        if isinstance(self.block_production_mode, str):
            self.block_production_mode = parse_block_production_mode(
                self.block_production_mode
            )


@dataclass(frozen=True)
class CreateNetworkRequest:
    """The payload sent to create a hosted network."""

    workspace_id: uuid.UUID
    name: str
    description: str | None
    datasource_rpc_url: str
    block_production_mode: BlockProductionMode

    def __post_init__(self) -> None:
        if isinstance(self.workspace_id, str):
            object.__setattr__(self, "workspace_id", uuid.UUID(self.workspace_id))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the request."""
        return {
            "workspace_id": str(self.workspace_id),
            "name": self.name,
            "description": self.description,
            "datasource_rpc_url": self.datasource_rpc_url,
            "block_production_mode": str(self.block_production_mode),
        }