import time

import requests

from Wolfbot.config import config
from Wolfbot.runtime import log_event, metrics_observe_ms

from .errors import ConfigError, SemanticFailure, StatusError, TransportError
from .parser import parse_query_result

HTTP_STATUS_CODE_OK = 200


def build_query_params(query, app_id):
    return {
        "appid": str(app_id or ""),
        "format": "image,plaintext",
        "input": str(query or ""),
    }


def send_query(query, *, app_id=None, endpoint=None, timeout_s=None, http_get=None):
    """
    Perform the single GET against the Full Results API.
    :return: the requests.Response, already checked for HTTP 200
    """
    app_id = config.wolframalpha_id if app_id is None else app_id
    if not str(app_id or "").strip():
        raise ConfigError("Set WOLFBOT_WOLFRAMALPHA_ID.")
    endpoint = endpoint or config.wolframalpha_endpoint
    timeout_s = config.wolframalpha_timeout_s if timeout_s is None else timeout_s
    get = http_get or requests.get

    log_event("wolf_query", endpoint=endpoint, query=str(query or ""))
    t0 = time.perf_counter()
    try:
        resp = get(endpoint, params=build_query_params(query, app_id), timeout=timeout_s)
    except KeyboardInterrupt as e:
        raise TransportError("Connection to WolframAlpha was interrupted", interrupted=True) from e
    except requests.RequestException as e:
        raise TransportError("Could not get the response from the server", details=str(e)) from e
    finally:
        metrics_observe_ms("wolf.api_ms", (time.perf_counter() - t0) * 1000.0)

    if resp.status_code != HTTP_STATUS_CODE_OK:
        raise StatusError(resp.status_code, expected=HTTP_STATUS_CODE_OK)
    return resp


def ensure_success(result):
    if not result.success:
        raise SemanticFailure(result.tips, hint=result.failure_message())
    return result


def fetch_query_result(query, **kwargs):
    """Dispatch the query and validate the response; raises a WolframError subclass on failure."""
    resp = send_query(query, **kwargs)
    result = parse_query_result(resp.content)
    log_event(
        "wolf_response",
        success=result.success,
        timing=result.timing,
        pods=len(result.pods),
    )
    return ensure_success(result)
