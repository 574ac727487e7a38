from io import BytesIO

import requests
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from Wolfbot.config import config

from .errors import RenderError

HEADER_POSITION = (10, 0)


def fetch_image(url, *, http_get=None, timeout_s=None):
    """
    Download and decode one remote image.
    :raises RenderError: on any transport, status or decoding failure
    """
    get = http_get or requests.get
    timeout_s = config.wolf_image_timeout_s if timeout_s is None else timeout_s
    try:
        resp = get(url, timeout=timeout_s)
        resp.raise_for_status()
        img = Image.open(BytesIO(resp.content))
        img.load()
    except requests.RequestException as e:
        raise RenderError("Failed to read image", source=url, details=str(e)) from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise RenderError("Failed to decode image", source=url, details=str(e)) from e
    return img.convert("RGBA")


def load_font(path=None, size=None):
    path = config.wolf_font_path if path is None else path
    size = config.wolf_font_size if size is None else int(size)
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            print(f"Could not load font {path}; using the default font")
    return ImageFont.load_default()


def label_image(source, header, *, width, height, margin, font=None, color=None):
    """Draw header in the top margin and the source image below it."""
    canvas = Image.new("RGBA", (max(1, int(width)), max(1, int(height) + int(margin))), (255, 255, 255, 0))
    draw = ImageDraw.Draw(canvas)
    font = font or load_font()
    color = color or config.wolf_label_color
    text = str(header or "")
    if text:
        draw.text(HEADER_POSITION, text, fill=color, font=font)
        left, _top, right, bottom = draw.textbbox(HEADER_POSITION, text, font=font)
        underline_y = min(bottom + 1, int(margin) - 1)
        if underline_y > 0:
            draw.line([(left, underline_y), (right, underline_y)], fill=color, width=1)
    canvas.paste(source, (0, int(margin)), source if source.mode == "RGBA" else None)
    return canvas


def combine_images(images, width, height):
    """Stack images top to bottom on a width x height canvas."""
    canvas = Image.new("RGBA", (max(1, int(width)), max(1, int(height))), (255, 255, 255, 0))
    y = 0
    for img in images:
        canvas.paste(img, (0, y))
        y += img.height
    return canvas


def image_to_png_bytes(image):
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
