"""Image asset store.

Assets are referenced by opaque ids ("icon1", "win1", "ffx_cover", ...) and
served to the browser as base64 data URIs. A missing file never breaks the
page: it is logged and replaced with a flat placeholder tile.
"""

from __future__ import annotations

import base64
import io
import logging
import mimetypes
from pathlib import Path
from typing import Dict, Optional

import numpy as np
from matplotlib import image as mpimg

from .config import ASSET_EXTENSIONS, ASSETS_PATH
from .palette import THEME, Theme

logger = logging.getLogger(__name__)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def png_data_uri(pixels: np.ndarray) -> str:
    """Encode an RGB(A) float array in [0, 1] as a PNG data URI."""
    buf = io.BytesIO()
    mpimg.imsave(buf, pixels, format="png")
    return f"data:image/png;base64,{_b64(buf.getvalue())}"


def placeholder_pixels(size: int = 32, theme: Theme = THEME) -> np.ndarray:
    """Gray tile with a dark 1px frame, the stand-in for missing art."""
    size = max(int(size), 2)
    tile = np.empty((size, size, 3), dtype=float)
    tile[:, :] = theme.color("gray-dark").rgb
    frame = theme.color("border-dark").rgb
    tile[0, :] = frame
    tile[-1, :] = frame
    tile[:, 0] = frame
    tile[:, -1] = frame
    return tile


class AssetStore:
    def __init__(self, base: Path = ASSETS_PATH, placeholder_size: int = 32):
        self.base = Path(base)
        self.placeholder_size = placeholder_size
        self._cache: Dict[str, str] = {}
        self.missing: set = set()

    def find(self, ref: str) -> Optional[Path]:
        for ext in ASSET_EXTENSIONS:
            p = self.base / f"{ref}{ext}"
            if p.exists():
                return p
        return None

    def data_uri(self, ref: str) -> str:
        if ref in self._cache:
            return self._cache[ref]

        path = self.find(ref)
        if path is None:
            if ref not in self.missing:
                logger.warning("Asset %r not found under %s, using placeholder", ref, self.base)
            self.missing.add(ref)
            uri = png_data_uri(placeholder_pixels(self.placeholder_size))
        else:
            mime = mimetypes.guess_type(path.name)[0] or "image/png"
            uri = f"data:{mime};base64,{_b64(path.read_bytes())}"
            logger.debug("Loaded asset %r from %s", ref, path)

        self._cache[ref] = uri
        return uri

    def img(self, ref: str, style: str = "", alt: str = "") -> str:
        style_attr = f" style='{style}'" if style else ""
        return f"<img src='{self.data_uri(ref)}' alt='{alt or ref}'{style_attr}/>"
