"""State behind the local network dashboard: selection, epoch progress and titles."""

from __future__ import annotations

from dataclasses import dataclass, field

from surfpool.activity import ActivityLog, remote_rpc_host

DEFAULT_SLOTS_PER_EPOCH = 432_000
ITEM_HEIGHT = 1
SCROLL_CONTENT_LENGTH = 5 * ITEM_HEIGHT
SLOT_GRID_ROWS = 3
FILLED_SLOT = "▮"
EMPTY_SLOT = "▯"
SPINNER = ("⢎ ", "⠎⠁", "⠊⠑", "⠈⠱", " ⡱", "⢀⡰", "⢄⡠", "⢆⡀")
HELP_TEXT = "(Esc) quit | (↑) move up | (↓) move down"
PAUSED_TITLE = "Transaction processing paused"
RUNNING_TITLE = "Processing incoming transactions"


@dataclass
class DashboardState:
    """What the dashboard shows, independent of how it is drawn.

    ``remote_rpc_url`` loses its query string and ``local_rpc_url`` (a
    ``host:port`` address) gains an ``http://`` prefix when the state is built.
    """

    remote_rpc_url: str = ""
    local_rpc_url: str = ""
    include_debug_logs: bool = False
    slot: int = 0
    slots_in_epoch: int = DEFAULT_SLOTS_PER_EPOCH
    successful_transactions: int = 0
    paused: bool = False
    selected: int = 0
    offset: int = 0
    scroll_position: int = 0
    activity: ActivityLog = field(default_factory=ActivityLog)

    def __post_init__(self) -> None:
        if self.slot < 0:
            raise ValueError("slot must not be negative")
        if self.slots_in_epoch <= 0:
            raise ValueError("slots_in_epoch must be positive")
        self.remote_rpc_url = remote_rpc_host(self.remote_rpc_url)
        if not self.local_rpc_url.startswith("http://"):
            self.local_rpc_url = f"http://{self.local_rpc_url}"

    def next(self) -> None:
        """Move the selection and the view one row down."""
        self.selected += 1
        self.scroll_position = min(self.scroll_position + 1, SCROLL_CONTENT_LENGTH - 1)
        self.offset += ITEM_HEIGHT

    def previous(self) -> None:
        """Move the selection and the view one row up, stopping at the top."""
        self.selected = max(self.selected - 1, 0)
        self.scroll_position = max(self.scroll_position - 1, 0)
        self.offset = max(self.offset - ITEM_HEIGHT, 0)

    def epoch_progress(self) -> int:
        """Return how far the current slot is through its epoch, as a whole percentage."""
        progress = self.slot % self.slots_in_epoch
        return int(progress / self.slots_in_epoch * 100.0)

    def slot_grid(self, width: int) -> str:
        """Draw three rows of slot markers, filled up to the slot's position in the grid."""
        line_len = max(width, 1)
        total = line_len * SLOT_GRID_ROWS
        cursor = self.slot % total
        cells = "".join(FILLED_SLOT if i < cursor else EMPTY_SLOT for i in range(total))
        return "\n".join(cells[start:start + line_len] for start in range(0, total, line_len))

    def activity_title(self) -> str:
        """Return the heading above the activity feed, with a spinner while running."""
        if self.paused:
            return PAUSED_TITLE
        return f"{SPINNER[self.slot % len(SPINNER)]} {RUNNING_TITLE}"

    def toggle_pause(self) -> bool:
        """Flip between paused and running; return whether it is now paused."""
        self.paused = not self.paused
        return self.paused