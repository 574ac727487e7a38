"""Failures of a single /wolf invocation.

Every class carries the ``error_code`` that ``Wolfbot.runtime.errors.humanize``
turns into the ephemeral reply text. None of them are retried.
"""


class WolframError(Exception):
    error_code = "execution_failed"

    def __init__(self, message="", *, details=""):
        super().__init__(message or self.error_code)
        self.details = str(details or "")


class ConfigError(WolframError):
    error_code = "missing_app_id"


class TransportError(WolframError):
    """The request never produced a response (connection error, timeout, interrupt)."""

    error_code = "transport_failed"

    def __init__(self, message="", *, details="", interrupted=False):
        super().__init__(message, details=details)
        self.interrupted = bool(interrupted)
        if self.interrupted:
            self.error_code = "transport_interrupted"


class StatusError(WolframError):
    error_code = "bad_status"

    def __init__(self, status_code, *, expected=200):
        super().__init__(f"Unexpected status code: Expected: {expected} Actual: {status_code}")
        self.status_code = int(status_code)
        self.expected = int(expected)


class FormatError(WolframError):
    error_code = "bad_format"


class SemanticFailure(WolframError):
    """WolframAlpha answered, but could not interpret the query."""

    error_code = "query_failed"

    def __init__(self, tips=None, *, hint=""):
        self.tips = tips
        if not hint and tips is not None:
            hint = tips.to_message()
        super().__init__("WolframAlpha could not interpret the query", details=hint)


class RenderError(WolframError):
    error_code = "render_failed"

    def __init__(self, message="", *, source="", details=""):
        super().__init__(message, details=details)
        self.source = str(source or "")
