import xml.etree.ElementTree as ET

from .errors import FormatError
from .models import (
    DidYouMean,
    Image,
    PlainText,
    Pod,
    QueryResult,
    RelatedExample,
    SubPod,
    Tip,
    Tips,
)


_TRUE = ("1", "true", "yes")


def _flag(element, name):
    return str(element.get(name, "") or "").strip().lower() in _TRUE


def _int_attr(element, name, default=0):
    raw = element.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return int(str(raw).strip())
    except ValueError as e:
        raise FormatError(f"<{element.tag}> attribute {name}={raw!r} is not an integer") from e


def _float_attr(element, name, default=0.0):
    raw = element.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return float(str(raw).strip())
    except ValueError as e:
        raise FormatError(f"<{element.tag}> attribute {name}={raw!r} is not a number") from e


def _parse_image(img, plaintext):
    src = str(img.get("src", "") or "").strip()
    if not src:
        raise FormatError("<img> without src")
    return Image(
        src=src,
        title=str(img.get("title", "") or ""),
        width=_int_attr(img, "width"),
        height=_int_attr(img, "height"),
        alt_text=plaintext or str(img.get("alt", "") or ""),
    )


def _parse_subpod(element):
    plaintext_el = element.find("plaintext")
    plaintext = (plaintext_el.text or "").strip() if plaintext_el is not None else ""
    img = element.find("img")
    if img is not None:
        content = _parse_image(img, plaintext)
    elif plaintext:
        content = PlainText(plaintext)
    else:
        content = None
    return SubPod(title=str(element.get("title", "") or ""), content=content)


def _parse_pod(element):
    return Pod(
        title=str(element.get("title", "") or ""),
        id=str(element.get("id", "") or ""),
        subpods=tuple(_parse_subpod(s) for s in element.findall("subpod")),
    )


def _parse_tips(element):
    if element is None:
        return None
    tips = tuple(Tip(str(t.get("text", "") or "")) for t in element.findall("tip"))
    return Tips(count=_int_attr(element, "count", len(tips)), tips=tips)


def _parse_related_examples(element):
    if element is None:
        return ()
    return tuple(
        RelatedExample(
            input=str(r.get("input", "") or ""),
            description=str(r.get("desc", "") or ""),
            category=str(r.get("category", "") or ""),
            category_thumb=str(r.get("categorythumb", "") or ""),
            category_page=str(r.get("categorypage", "") or ""),
        )
        for r in element.findall("relatedexample")
    )


def _parse_did_you_means(element):
    if element is None:
        return ()
    return tuple(
        DidYouMean(
            text=(d.text or "").strip(),
            score=_float_attr(d, "score"),
            level=str(d.get("level", "") or ""),
        )
        for d in element.findall("didyoumean")
    )


def _parse_error_message(root):
    error = root.find("error")
    if error is None:
        return ""
    msg = error.find("msg")
    return (msg.text or "").strip() if msg is not None else ""


def parse_query_result(body):
    """
    Deserialize a <queryresult> document.
    :param body: XML text or bytes as returned by the API
    :return: QueryResult
    :raises FormatError: if the body is not a well-formed queryresult
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    if not body or not body.strip():
        raise FormatError("Empty response body")
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise FormatError(f"Malformed XML: {e}") from e
    if root.tag != "queryresult":
        raise FormatError(f"Unexpected root element <{root.tag}>")

    pods = tuple(_parse_pod(p) for p in root.findall("pod"))
    return QueryResult(
        success=_flag(root, "success"),
        error=_flag(root, "error"),
        timing=str(root.get("timing", "") or ""),
        num_pods=_int_attr(root, "numpods", len(pods)),
        error_message=_parse_error_message(root),
        pods=pods,
        tips=_parse_tips(root.find("tips")),
        related_examples=_parse_related_examples(root.find("relatedexamples")),
        did_you_means=_parse_did_you_means(root.find("didyoumeans")),
    )
