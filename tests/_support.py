import contextlib
import tempfile
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image

from Wolfbot.commands.interaction import Interaction
from Wolfbot.config import config
from Wolfbot.wolfram.errors import RenderError


SUCCESS_XML = """<?xml version='1.0' encoding='UTF-8'?>
<queryresult success='true' error='false' numpods='5' datatypes='' timedout='' timing='0.9' version='2.6'>
 <pod title='Input' scanner='Identity' id='Input' position='100' error='false' numsubpods='1'>
  <subpod title=''>
   <img src='https://img.test/input.gif' alt='2+2' title='2+2' width='40' height='18' />
   <plaintext>2+2</plaintext>
  </subpod>
 </pod>
 <pod title='Result' scanner='Simplification' id='Result' position='200' error='false' numsubpods='1' primary='true'>
  <subpod title=''>
   <img src='https://img.test/result.gif' alt='4' title='4' width='10' height='18' />
   <plaintext>4</plaintext>
  </subpod>
 </pod>
 <pod title='Number line' scanner='NumberLine' id='NumberLine' position='300' error='false' numsubpods='1'>
  <subpod title=''>
   <img src='https://img.test/numberline.gif' alt='' title='' width='330' height='60' />
   <plaintext></plaintext>
  </subpod>
 </pod>
 <pod title='Number name' scanner='Integer' id='NumberName' position='400' error='false' numsubpods='1'>
  <subpod title=''>
   <plaintext>four</plaintext>
  </subpod>
 </pod>
 <pod title='Visual representation' scanner='Integer' id='VisualRepresentation' position='500' error='false' numsubpods='1'>
  <subpod title=''>
   <img src='https://img.test/visual.gif' alt='' title='' width='100' height='200' />
  </subpod>
 </pod>
</queryresult>
"""

FAILURE_XML = """<queryresult success='false' error='false' numpods='0' timing='1.2'>
 <tips count='2'>
  <tip text='Check your spelling, and use English' />
  <tip text='Try a simpler query' />
 </tips>
 <didyoumeans count='1'>
  <didyoumean score='0.42' level='medium'>two plus two</didyoumean>
 </didyoumeans>
 <relatedexamples count='1'>
  <relatedexample input='Sample' desc='Sample desc' category='Cat' categorythumb='https://img.test/thumb.gif' categorypage='https://wa.test/cat' />
 </relatedexamples>
</queryresult>
"""


def many_pods_xml(count, height=200, width=50):
    pods = []
    for i in range(count):
        pods.append(
            f"<pod title='Pod {i}' id='P{i}'><subpod title=''>"
            f"<img src='https://img.test/{i}.gif' alt='' title='Image {i}' width='{width}' height='{height}' />"
            f"</subpod></pod>"
        )
    return f"<queryresult success='true' error='false' numpods='{count}' timing='2.5'>{''.join(pods)}</queryresult>"


def png_bytes(width=12, height=8, color=(200, 10, 10, 255)):
    buf = BytesIO()
    Image.new("RGBA", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


class FakeResponse:
    def __init__(self, status_code=200, content=b""):
        self.status_code = int(status_code)
        self.content = content.encode("utf-8") if isinstance(content, str) else content

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeGet:
    """Stands in for requests.get and records every call."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def fake_fetch(fail_on=None):
    fetched = []

    def fetch(src):
        fetched.append(src)
        if fail_on and fail_on in src:
            raise RenderError("Failed to read image", source=src)
        return Image.new("RGBA", (8, 6), (0, 0, 255, 255))

    fetch.fetched = fetched
    return fetch


class RecordingInteraction(Interaction):
    def __init__(self):
        self.deferred = 0
        self.edits = []

    def defer_reply(self):
        self.deferred += 1

    def edit_original(self, content, *, files=(), ephemeral=False):
        self.edits.append({"content": content, "files": list(files), "ephemeral": ephemeral})


@contextlib.contextmanager
def runtime_sandbox(**overrides):
    """Point runtime files at a temp folder and override config values for the block."""
    with tempfile.TemporaryDirectory() as td:
        values = {
            "runtime_log_path": str(Path(td) / "events.jsonl"),
            "runtime_receipts_path": str(Path(td) / "receipts.jsonl"),
            "runtime_metrics_path": str(Path(td) / "metrics.json"),
            "runtime_console_output_dir": str(Path(td) / "out"),
            "wolframalpha_id": "TEST-APPID",
        }
        values.update(overrides)
        old = {k: getattr(config, k) for k in values}
        for k, v in values.items():
            setattr(config, k, v)
        try:
            yield Path(td)
        finally:
            for k, v in old.items():
                setattr(config, k, v)


class BrokenInteraction(RecordingInteraction):
    """A host that refuses every reply edit."""

    def edit_original(self, content, *, files=(), ephemeral=False):
        raise RuntimeError("Unknown Webhook")
