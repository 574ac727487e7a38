"""Read-only view of a WolframAlpha ``<queryresult>`` document.

Example (trimmed)::

    <queryresult success='true' error='false' numpods='2' timing='0.9'>
      <pod title='Input' id='Input'>
        <subpod title=''>
          <img src='https://...' alt='2+2' title='2+2' width='30' height='18'/>
          <plaintext>2+2</plaintext>
        </subpod>
      </pod>
      ...
    </queryresult>

A failed query carries ``success='false'`` and optionally::

    <tips count='1'>
      <tip text='Check your spelling, and use English' />
    </tips>
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Image:
    src: str
    title: str = ""
    width: int = 0
    height: int = 0
    alt_text: str = ""


@dataclass(frozen=True)
class PlainText:
    text: str


SubPodContent = Union[Image, PlainText, None]


@dataclass(frozen=True)
class SubPod:
    title: str = ""
    content: SubPodContent = None

    @property
    def image(self) -> Optional[Image]:
        return self.content if isinstance(self.content, Image) else None

    @property
    def plaintext(self) -> str:
        if isinstance(self.content, PlainText):
            return self.content.text
        if isinstance(self.content, Image):
            return self.content.alt_text
        return ""


@dataclass(frozen=True)
class Pod:
    title: str = ""
    id: str = ""
    subpods: Tuple[SubPod, ...] = ()


@dataclass(frozen=True)
class Tip:
    text: str


@dataclass(frozen=True)
class Tips:
    count: int = 0
    tips: Tuple[Tip, ...] = ()

    def to_message(self, separator=", "):
        return separator.join(t.text for t in self.tips if t.text)


@dataclass(frozen=True)
class RelatedExample:
    input: str = ""
    description: str = ""
    category: str = ""
    category_thumb: str = ""
    category_page: str = ""


@dataclass(frozen=True)
class DidYouMean:
    text: str
    score: float = 0.0
    level: str = ""


@dataclass(frozen=True)
class QueryResult:
    success: bool
    error: bool = False
    timing: str = ""
    num_pods: int = 0
    error_message: str = ""
    pods: Tuple[Pod, ...] = ()
    tips: Optional[Tips] = None
    related_examples: Tuple[RelatedExample, ...] = field(default=())
    did_you_means: Tuple[DidYouMean, ...] = field(default=())

    def iter_images(self) -> Iterator[Tuple[Pod, SubPod, Image]]:
        """Yield every (pod, subpod, image) in document order, skipping text-only sub-pods."""
        for pod in self.pods:
            for subpod in pod.subpods:
                if subpod.image is not None:
                    yield pod, subpod, subpod.image

    def failure_message(self):
        parts = []
        if self.error_message:
            parts.append(self.error_message)
        if self.tips is not None:
            msg = self.tips.to_message()
            if msg:
                parts.append(msg)
        if self.did_you_means:
            parts.append("Did you mean: " + ", ".join(d.text for d in self.did_you_means if d.text))
        return " ".join(parts)
