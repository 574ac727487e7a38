import datetime
import json
import os

from Wolfbot.config import config
from .structured_log import get_turn_id


def _path():
    p = getattr(config, "runtime_receipts_path", "Wolfbot/data/delivery_receipts.jsonl")
    return os.path.abspath(str(p))


def record_receipt(action, ok, *, files=0, ephemeral=False, error=""):
    """
    Append the outcome of one reply edit.
    :param ok: False when the host raised while delivering the reply
    """
    row = {
        "ts": datetime.datetime.now().isoformat(timespec="seconds"),
        "turn_id": get_turn_id(),
        "action": str(action or ""),
        "ok": bool(ok),
        "files": int(files),
        "ephemeral": bool(ephemeral),
    }
    if error:
        row["error"] = str(error)
    path = _path()
    folder = os.path.dirname(path)
    if folder and not os.path.isdir(folder):
        os.makedirs(folder, exist_ok=True)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
    except OSError:
        return False
    return True


def recent_receipts(limit=20, failed_only=False):
    path = _path()
    if not os.path.exists(path):
        return []
    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except ValueError:
                continue
            if not isinstance(obj, dict):
                continue
            if failed_only and obj.get("ok"):
                continue
            rows.append(obj)
    return rows[-max(1, int(limit)) :]
