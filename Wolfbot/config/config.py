import os
from pathlib import Path

try:
    from dotenv import load_dotenv  # type: ignore
except Exception:
    load_dotenv = None

if load_dotenv is not None:
    # Load project-level .env automatically so runtime behavior matches configured values.
    _repo_root = Path(__file__).resolve().parents[2]
    load_dotenv(_repo_root / ".env", override=False)


# WolframAlpha Full Results API
wolframalpha_id = os.getenv("WOLFBOT_WOLFRAMALPHA_ID", "")
wolframalpha_endpoint = os.getenv("WOLFBOT_WOLFRAMALPHA_ENDPOINT", "http://api.wolframalpha.com/v2/query")
wolframalpha_timeout_s = float(os.getenv("WOLFBOT_WOLFRAMALPHA_TIMEOUT_S", "20"))


# /wolf strip packing
#
# Each sub-pod image is labelled with its pod title in a margin above the
# image, then labelled images are stacked into strips no taller than
# wolf_max_strip_height_px. At most wolf_max_attachments strips are sent.
wolf_max_strip_height_px = int(os.getenv("WOLFBOT_WOLF_MAX_STRIP_HEIGHT_PX", "300"))
wolf_label_margin_px = int(os.getenv("WOLFBOT_WOLF_LABEL_MARGIN_PX", "20"))
wolf_max_attachments = int(os.getenv("WOLFBOT_WOLF_MAX_ATTACHMENTS", "10"))
wolf_label_color = os.getenv("WOLFBOT_WOLF_LABEL_COLOR", "#3C3C3C")
wolf_font_path = os.getenv("WOLFBOT_WOLF_FONT_PATH", "")
wolf_font_size = int(os.getenv("WOLFBOT_WOLF_FONT_SIZE", "15"))
wolf_image_timeout_s = float(os.getenv("WOLFBOT_WOLF_IMAGE_TIMEOUT_S", "20"))


# Runtime / ops
runtime_log_path = os.getenv("WOLFBOT_RUNTIME_LOG_PATH", "Wolfbot/data/runtime_events.jsonl")
runtime_receipts_path = os.getenv("WOLFBOT_RUNTIME_RECEIPTS_PATH", "Wolfbot/data/delivery_receipts.jsonl")
runtime_metrics_path = os.getenv("WOLFBOT_RUNTIME_METRICS_PATH", "Wolfbot/data/metrics_snapshot.json")
runtime_console_output_dir = os.getenv("WOLFBOT_RUNTIME_CONSOLE_OUTPUT_DIR", "Wolfbot/data/wolf_output")
