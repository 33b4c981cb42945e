"""Command options and the configuration they produce for a local network."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from surfpool.keys import Pubkey, read_keypair_pubkey

DEFAULT_SLOT_TIME_MS = 400
DEFAULT_EXPLORER_PORT = 8901
DEFAULT_SIMNET_PORT = 8899
DEFAULT_WS_PORT = 8900
DEFAULT_TXTX_PORT = 8488
DEFAULT_NETWORK_HOST = "127.0.0.1"
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEVNET_RPC_URL = "https://api.devnet.solana.com"
TESTNET_RPC_URL = "https://api.testnet.solana.com"
DEFAULT_ID_SVC_URL = "https://id.txtx.run/v1"
DEFAULT_CLOUD_URL = "https://cloud.txtx.run"
DEFAULT_SVM_GQL_URL = "https://svm-cloud.gql.txtx.run/v1/graphql"
DEFAULT_SVM_CLOUD_API_URL = "https://svm-cloud-api.txtx.run/v1/surfnets"
DEFAULT_RUNBOOK = "deployment"
DEFAULT_AIRDROP_AMOUNT = 10_000_000_000_000
DEFAULT_SOLANA_KEYPAIR_PATH = str(Path("~", ".config", "solana", "id.json"))
DATASOURCE_ENV_VAR = "SURFPOOL_DATASOURCE_RPC_URL"


def get_home_dir() -> str:
    """Return the user's home directory, honouring ``SNAP_REAL_HOME`` when set."""
    real_home = os.environ.get("SNAP_REAL_HOME")
    if real_home is not None:
        return str(Path(real_home))
    return str(Path.home())


def resolve_path(path: str) -> Path:
    """Expand a leading ``~`` to the home directory."""
    if path.startswith("~"):
        return Path(f"{get_home_dir()}{path[1:]}")
    return Path(path)


class NetworkType(Enum):
    MAINNET = "mainnet"
    DEVNET = "devnet"
    TESTNET = "testnet"

    @property
    def rpc_url(self) -> str:
        return {
            NetworkType.MAINNET: DEFAULT_RPC_URL,
            NetworkType.DEVNET: DEVNET_RPC_URL,
            NetworkType.TESTNET: TESTNET_RPC_URL,
        }[self]


class BlockProductionMode(Enum):
    CLOCK = "clock"
    TRANSACTION = "transaction"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RpcConfig:
    bind_host: str = DEFAULT_NETWORK_HOST
    bind_port: int = DEFAULT_SIMNET_PORT
    ws_port: int = DEFAULT_WS_PORT

    def socket_address(self) -> str:
        return f"{self.bind_host}:{self.bind_port}"


@dataclass
class SimnetConfig:
    remote_rpc_url: str = DEFAULT_RPC_URL
    slot_time: int = DEFAULT_SLOT_TIME_MS
    block_production_mode: BlockProductionMode = BlockProductionMode.CLOCK
    airdrop_addresses: list[Pubkey] = field(default_factory=list)
    airdrop_token_amount: int = DEFAULT_AIRDROP_AMOUNT


@dataclass(frozen=True)
class SubgraphConfig:
    pass


@dataclass
class SurfpoolConfig:
    simnets: list[SimnetConfig]
    rpc: RpcConfig
    subgraph: SubgraphConfig
    plugin_config_path: list[Path]


@dataclass
class StartSimnet:
    """Options of the command that starts a local network."""

    manifest_path: str = "./Surfpool.toml"
    simnet_port: int = DEFAULT_SIMNET_PORT
    ws_port: int = DEFAULT_WS_PORT
    network_host: str = DEFAULT_NETWORK_HOST
    slot_time: int = DEFAULT_SLOT_TIME_MS
    rpc_url: str | None = None
    network: NetworkType | None = None
    no_tui: bool = False
    debug: bool = False
    no_deploy: bool = False
    runbooks: list[str] = field(default_factory=lambda: [DEFAULT_RUNBOOK])
    airdrop_addresses: list[str] = field(default_factory=list)
    airdrop_token_amount: int = DEFAULT_AIRDROP_AMOUNT
    airdrop_keypair_path: list[str] = field(
        default_factory=lambda: [DEFAULT_SOLANA_KEYPAIR_PATH]
    )
    no_explorer: bool = False
    watch: bool = False
    plugin_config_path: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rpc_url is not None and self.network is not None:
            raise ValueError("--rpc-url cannot be used with --network")

    def get_airdrop_addresses(self) -> tuple[list[Pubkey], list[str]]:
        """Collect airdrop recipients, returning them with the errors met along the way."""
        addresses: list[Pubkey] = []
        errors: list[str] = []
        for address in self.airdrop_addresses:
            try:
                addresses.append(Pubkey.parse(address))
            except ValueError as exc:
                errors.append(
                    f"Unable to airdrop pubkey {address}: Error parsing pubkey: {exc}"
                )
        for keypair_path in self.airdrop_keypair_path:
            path = resolve_path(keypair_path)
            try:
                addresses.append(read_keypair_pubkey(path))
            except (OSError, ValueError) as exc:
                errors.append(
                    f"Unable to complete airdrop; Error reading keypair file: {path}: {exc}"
                )
        return addresses, errors

    def rpc_config(self) -> RpcConfig:
        return RpcConfig(
            bind_host=self.network_host,
            bind_port=self.simnet_port,
            ws_port=self.ws_port,
        )

    def simnet_config(self, airdrop_addresses: list[Pubkey]) -> SimnetConfig:
        if self.network is not None:
            remote_rpc_url = self.network.rpc_url
        elif self.rpc_url is not None:
            remote_rpc_url = self.rpc_url
        else:
            remote_rpc_url = os.environ.get(DATASOURCE_ENV_VAR, DEFAULT_RPC_URL)
        return SimnetConfig(
            remote_rpc_url=remote_rpc_url,
            slot_time=self.slot_time,
            block_production_mode=BlockProductionMode.CLOCK,
            airdrop_addresses=list(airdrop_addresses),
            airdrop_token_amount=self.airdrop_token_amount,
        )

    def subgraph_config(self) -> SubgraphConfig:
        return SubgraphConfig()

    def surfpool_config(self, airdrop_addresses: list[Pubkey]) -> SurfpoolConfig:
        plugin_paths = [Path(p) for p in self.plugin_config_path] or [Path("plugins")]
        return SurfpoolConfig(
            simnets=[self.simnet_config(airdrop_addresses)],
            rpc=self.rpc_config(),
            subgraph=self.subgraph_config(),
            plugin_config_path=plugin_paths,
        )


@dataclass
class ExecuteRunbook:
    """Options of the command that executes a runbook.

    ``output_json`` asks for JSON outputs; ``output_json_dir`` names the directory
    they are written to, or ``None`` to print them.
    """

    runbook: str
    manifest_path: str = "./txtx.yml"
    unsupervised: bool = False
    web_console: bool = False
    term_console: bool = False
    output_json: bool = False
    output_json_dir: str | None = None
    output: str | None = None
    explain: bool = False
    environment: str | None = None
    inputs: list[str] = field(default_factory=list)
    force_execution: bool = False

    def __post_init__(self) -> None:
        modes = sum((self.unsupervised, self.web_console, self.term_console))
        if modes > 1:
            raise ValueError(
                "only one of --unsupervised, --browser and --terminal may be given"
            )
        if self.output is not None and self.output_json:
            raise ValueError("--output cannot be used with --output-json")
        if self.output_json_dir is not None and not self.output_json:
            raise ValueError("an output directory requires --output-json")

    @classmethod
    def default_localnet(cls, runbook_name: str) -> ExecuteRunbook:
        return cls(
            runbook=runbook_name,
            manifest_path="./txtx.yml",
            unsupervised=True,
            output_json=True,
            output_json_dir="runbook-outputs",
            environment="localnet",
        )

    def with_manifest_path(self, manifest_path: str) -> ExecuteRunbook:
        return dataclasses.replace(self, manifest_path=manifest_path)

    def do_start_supervisor_ui(self) -> bool:
        return self.web_console or (not self.unsupervised and not self.term_console)