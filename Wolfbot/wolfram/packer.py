"""Greedy packing of labelled sub-pod images into height-bounded strips.

Planning works on declared image dimensions only, so it can be tested and
reasoned about without any network access or rendering. ``pack_result``
then fetches and draws just the images the plan keeps.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Tuple

from Wolfbot.config import config
from Wolfbot.runtime import log_event

from .render import combine_images, fetch_image, image_to_png_bytes, label_image, load_font


@dataclass(frozen=True)
class PackEntry:
    name: str
    width: int
    height: int
    header: str = ""
    payload: Any = None


@dataclass(frozen=True)
class Strip:
    name: str
    width: int
    height: int
    entries: Tuple[PackEntry, ...]


@dataclass(frozen=True)
class StripAccumulator:
    entries: Tuple[PackEntry, ...] = ()
    max_width: int = 0
    height: int = 0
    emitted: int = 0

    def add(self, entry):
        return replace(
            self,
            entries=self.entries + (entry,),
            max_width=max(self.max_width, entry.width),
            height=self.height + entry.height,
        )

    def flush(self):
        """Close the current strip; returns (strip, fresh accumulator)."""
        strip = Strip(
            name=self.entries[0].name,
            width=self.max_width,
            height=self.height,
            entries=self.entries,
        )
        return strip, StripAccumulator(emitted=self.emitted + 1)


@dataclass(frozen=True)
class StepResult:
    accumulator: StripAccumulator
    completed: Tuple[Strip, ...] = ()
    stop: bool = False


@dataclass(frozen=True)
class Attachment:
    name: str
    data: bytes
    width: int
    height: int


def step(acc, entry, *, is_last, max_height, max_files):
    if acc.emitted >= max_files:
        return StepResult(acc, (), True)

    completed = []
    if acc.entries and acc.height + entry.height > max_height:
        strip, acc = acc.flush()
        completed.append(strip)
        if acc.emitted >= max_files:
            return StepResult(acc, tuple(completed), True)

    acc = acc.add(entry)
    if is_last:
        strip, acc = acc.flush()
        completed.append(strip)
    return StepResult(acc, tuple(completed), acc.emitted >= max_files)


def plan_strips(entries, *, max_height, max_files) -> List[Strip]:
    """
    Fold entries into strips, in the order the strips are completed.
    Entries past the max_files-th strip are dropped.
    """
    items = list(entries)
    strips = []
    if max_files <= 0:
        return strips
    acc = StripAccumulator()
    last = len(items) - 1
    for i, entry in enumerate(items):
        res = step(acc, entry, is_last=(i == last), max_height=max_height, max_files=max_files)
        acc = res.accumulator
        strips.extend(res.completed)
        if res.stop:
            break
    return strips


def entry_name(pod, image):
    base = (image.title or "").strip() or (pod.title or "").strip() or "wolframalpha"
    return base + ".png"


def entries_for(result, *, margin) -> Iterable[PackEntry]:
    for pod, _subpod, image in result.iter_images():
        yield PackEntry(
            name=entry_name(pod, image),
            width=int(image.width),
            height=int(image.height) + int(margin),
            header=pod.title,
            payload=image,
        )


def unique_names(names):
    seen = {}
    out = []
    for name in names:
        n = seen.get(name, 0) + 1
        seen[name] = n
        if n == 1:
            out.append(name)
            continue
        stem, dot, ext = name.rpartition(".")
        out.append(f"{stem} ({n}).{ext}" if dot else f"{name} ({n})")
    return out


def render_strip(strip, *, margin, fetch=None, font=None):
    fetch = fetch or fetch_image
    labelled = []
    for entry in strip.entries:
        image = entry.payload
        source = fetch(image.src)
        labelled.append(
            label_image(
                source,
                entry.header,
                width=image.width,
                height=image.height,
                margin=margin,
                font=font,
            )
        )
    return combine_images(labelled, strip.width, strip.height)


def pack_result(result, *, fetch=None, max_height=None, max_files=None, margin=None, font=None):
    """
    Turn a successful QueryResult into PNG attachments.
    :raises RenderError: if any kept image cannot be fetched or decoded
    """
    max_height = config.wolf_max_strip_height_px if max_height is None else int(max_height)
    max_files = config.wolf_max_attachments if max_files is None else int(max_files)
    margin = config.wolf_label_margin_px if margin is None else int(margin)
    font = font or load_font()

    entries = list(entries_for(result, margin=margin))
    strips = plan_strips(entries, max_height=max_height, max_files=max_files)
    kept = sum(len(s.entries) for s in strips)
    log_event("wolf_plan", pods=len(result.pods), images=len(entries), strips=len(strips), dropped=len(entries) - kept)

    attachments = []
    names = unique_names([s.name for s in strips])
    for strip, name in zip(strips, names):
        canvas = render_strip(strip, margin=margin, fetch=fetch, font=font)
        attachments.append(Attachment(name=name, data=image_to_png_bytes(canvas), width=strip.width, height=strip.height))
        log_event("wolf_strip", name=name, width=strip.width, height=strip.height, images=len(strip.entries))
    return attachments
