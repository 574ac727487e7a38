from .errors import (
    WolframError,
    ConfigError,
    TransportError,
    StatusError,
    FormatError,
    SemanticFailure,
    RenderError,
)
from .models import QueryResult, Pod, SubPod, Image, PlainText, Tip, Tips, RelatedExample, DidYouMean
from .parser import parse_query_result
from .client import build_query_params, send_query, ensure_success, fetch_query_result
from .packer import PackEntry, Strip, StripAccumulator, StepResult, Attachment, step, plan_strips, pack_result
