_MAP = {
    "missing_app_id": "WolframAlpha app id is not configured.",
    "transport_failed": "Unable to get a response from WolframAlpha API",
    "transport_interrupted": "Connection to WolframAlpha was interrupted",
    "bad_status": "The response' status code was incorrect",
    "bad_format": "Unexpected response from WolframAlpha API",
    "query_failed": "Could not successfully receive the result",
    "render_failed": "Unable to generate message based on the WolframAlpha response",
    "missing_required_args": "I need more details to run this command.",
    "unknown_command": "This command does not exist.",
}


def humanize(error_code, details=""):
    code = str(error_code or "").strip()
    msg = _MAP.get(code, "An unexpected error occurred.")
    if details:
        return f"{msg} {details}"
    return msg
