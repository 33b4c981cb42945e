# surfpool

Building blocks for running a local Solana simulation network ("surfnet"):
start options and the configuration built from them, base58 public keys and
keypair files, request payloads for a hosted surfnet, and the state a
dashboard shows. Everything here is plain Python. None of it touches the
network or draws to the terminal.

## Modules

### `surfpool.config`

`StartSimnet` holds the options for starting a local network. These are the
manifest path, the RPC and WebSocket ports, the host, the slot time, a
datasource `rpc_url` or a predefined `NetworkType` (`MAINNET`, `DEVNET`,
`TESTNET`), airdrop addresses, airdrop keypair files and plugin config paths.

- Giving both `rpc_url` and `network` raises `ValueError`.
- `get_airdrop_addresses()` returns `(pubkeys, errors)`. It parses each
  address and reads each keypair file. A path starting with `~` is expanded
  with `resolve_path`, which honours `SNAP_REAL_HOME`. Failures are collected
  as messages; none of them raises.
- `rpc_config()`, `simnet_config(addresses)`, `subgraph_config()` and
  `surfpool_config(addresses)` build `RpcConfig`, `SimnetConfig`,
  `SubgraphConfig` and `SurfpoolConfig`.
- With neither `network` nor `rpc_url`, the remote RPC URL comes from the
  `SURFPOOL_DATASOURCE_RPC_URL` environment variable, or else the mainnet
  default.
- If no plugin config paths are given, the plugin path defaults to `plugins`.

`ExecuteRunbook` holds the options for executing a runbook.
`ExecuteRunbook.default_localnet(name)` returns these options:

- unsupervised;
- JSON outputs written to `runbook-outputs`;
- the `localnet` environment.

`with_manifest_path(path)` returns a copy with another manifest path.
`do_start_supervisor_ui()` tells whether the browser console would be used.
Conflicting execution modes, or `output` together with `output_json`, raise
`ValueError`.

`BlockProductionMode` has three values: `CLOCK`, `TRANSACTION` and `MANUAL`.

### `surfpool.keys`

- `b58encode` and `b58decode` convert with the Bitcoin base58 alphabet.
- `Pubkey.parse(text)` reads a 32-byte base58 public key and raises
  `ValueError` on bad input.
- `read_keypair_pubkey(path)` reads a JSON keypair file holding 64 byte
  values. It checks that the public half matches the ed25519 secret seed and
  returns the `Pubkey`.

### `surfpool.cloud`

- `CloudStartCommand` holds the options for starting a hosted surfnet.
- `CreateNetworkRequest(...).to_dict()` gives the JSON-ready payload.
- `block_production_choices()` lists the prompt labels.
- `mode_from_index(i)` maps a selected label to its `BlockProductionMode`.
- `parse_block_production_mode("clock" | "transaction" | "manual")` reads a
  mode by name.
- Invalid indexes and names raise `ValueError`.

### `surfpool.activity`

`ActivityLog` keeps the events, newest first, together with a status-bar
message.

- `record(event_type, message, timestamp=None)` adds an event.
- `apply_progress_update(color, status, message)` does one of two things:
  - a `YELLOW` step sets the status bar;
  - any other colour clears the status bar and logs the message. `RED` is
    logged as `FAILURE`, the rest as `INFO`.

Two helper functions go with it:

- `remote_rpc_host(url)` drops a query string.
- `format_event_time(ts)` formats a timestamp as `HH:MM:SS.mmm`.

### `surfpool.dashboard`

`DashboardState` holds the selection and scrolling for the event table
(`next()`, `previous()`) and the pause flag (`toggle_pause()`). It also
computes three display values:

- `epoch_progress()`: a whole percentage;
- `slot_grid(width)`: three rows of slot markers;
- `activity_title()`: a spinner, or a paused notice.

### `surfpool.colors`

These functions colour text only when stdout is a terminal; otherwise the
text comes back unchanged:

- `green`, `red`, `yellow`, `blue`, `purple`, `black`;
- `colorize(text, colour, stream)`, which takes the `Colour` and the stream
  to check;
- `format_err`, `format_warn` and `format_note`, which prefix a label.

`pluralize(value, word)` adds an `s` when `value` exceeds one.

## Examples

```python
from surfpool.config import StartSimnet

cmd = StartSimnet(rpc_url="http://localhost:9000", airdrop_keypair_path=[])
addresses, errors = cmd.get_airdrop_addresses()
config = cmd.surfpool_config(addresses)
print(config.simnets[0].remote_rpc_url)   # http://localhost:9000
print(config.rpc.socket_address())        # 127.0.0.1:8899
```

```python
from surfpool.dashboard import DashboardState

state = DashboardState(slot=5, local_rpc_url="127.0.0.1:8899")
print(state.local_rpc_url)   # http://127.0.0.1:8899
print(state.slot_grid(4))
# ▮▮▮▮
# ▮▯▯▯
# ▯▯▯▯
```

## What this package does not do

- It has no command-line program.
- It does not start or run a simulation network.
- It serves no RPC, GraphQL or explorer endpoint.
- It does not execute runbooks.
- It does not detect a project's program framework or read its build
  manifests.
- It does not call the hosted service. `surfpool.cloud` only builds the
  request.
- It does not draw the dashboard. `surfpool.dashboard` and
  `surfpool.activity` only keep the state that a display would render.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```