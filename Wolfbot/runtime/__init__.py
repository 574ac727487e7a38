from .structured_log import set_turn_id, get_turn_id, log_event, recent_events
from .receipts import record_receipt, recent_receipts
from .metrics import metrics_inc, metrics_observe_ms, metrics_snapshot, metrics_counter, metrics_reset, load_snapshot
from .errors import humanize
