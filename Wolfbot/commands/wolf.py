import time

from Wolfbot.runtime import (
    humanize,
    log_event,
    metrics_inc,
    metrics_observe_ms,
    metrics_snapshot,
    record_receipt,
    set_turn_id,
)
from Wolfbot.wolfram import WolframError, fetch_query_result, pack_result


def spec():
    return {
        "name": "wolf",
        "description": "Renders mathematical queries using WolframAlpha",
        "args": {"query": "string"},
        "required": ["query"],
    }


def _deliver(interaction, action, content, *, files=(), ephemeral=False):
    """Edit the deferred reply and record whether the host accepted it."""
    try:
        interaction.edit_original(content, files=files, ephemeral=ephemeral)
    except Exception as e:
        record_receipt(action, False, files=len(files), ephemeral=ephemeral, error=str(e))
        log_event("wolf_delivery_failed", action=action, error=str(e))
        metrics_inc("wolf.delivery_failed")
        metrics_snapshot()
        raise
    record_receipt(action, True, files=len(files), ephemeral=ephemeral)


def _fail(interaction, err):
    message = humanize(err.error_code, err.details if err.error_code == "query_failed" else "")
    log_event(
        "wolf_error",
        error_code=err.error_code,
        error=str(err),
        details=err.details,
        source=getattr(err, "source", ""),
    )
    metrics_inc(f"wolf.{err.error_code}")
    _deliver(interaction, "wolf_error", message, ephemeral=True)
    metrics_snapshot()
    return {"ok": False, "error_code": err.error_code, "details": message}


def run(*, interaction, query="", http_get=None, fetch=None, max_height=None, max_files=None):
    """
    Answer a /wolf query.
    :param interaction: host Interaction; its reply is deferred first and edited exactly once
    :param http_get: replaces requests.get for the API call
    :param fetch: replaces the image downloader
    :return: {"ok": True, "files": [...], "timing": ...} or {"ok": False, "error_code": ...}
    """
    set_turn_id()
    metrics_inc("wolf.invocations")
    t0 = time.perf_counter()

    # The processing takes some time
    interaction.defer_reply()
    try:
        result = fetch_query_result(query, http_get=http_get)
        attachments = pack_result(result, fetch=fetch, max_height=max_height, max_files=max_files)
    except WolframError as e:
        out = _fail(interaction, e)
        if getattr(e, "interrupted", False):
            raise KeyboardInterrupt from e
        return out
    finally:
        metrics_observe_ms("wolf.total_ms", (time.perf_counter() - t0) * 1000.0)

    files = [(a.name, a.data) for a in attachments]
    _deliver(interaction, "wolf_reply", f"Computed in {result.timing}", files=files)
    metrics_inc("wolf.ok")
    metrics_inc("wolf.attachments", len(files))
    log_event("wolf_reply", timing=result.timing, files=[name for name, _data in files])
    metrics_snapshot()
    return {"ok": True, "timing": result.timing, "files": [name for name, _data in files]}
