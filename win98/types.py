from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

Callback = Callable[[], None]


@dataclass(frozen=True)
class ColorToken:
    name: str
    rgb: Tuple[float, float, float]  # components in [0, 1]


@dataclass(frozen=True)
class FontToken:
    name: str
    family: str
    size: int
    weight: str = "normal"
    monospace: bool = False
    fallback: Optional[str] = None  # name of another FontToken
    system: bool = False  # family always available (generic CSS family)


@dataclass(frozen=True)
class BevelLayer:
    kind: str  # "fill" | "outer" | "inner" | "edge"
    color: str  # ColorToken name
    offset: Tuple[int, int] = (0, 0)
    width: int = 1


@dataclass(frozen=True)
class IconDescriptor:
    key: str
    label: str
    image_ref: str
    on_activate: Callback


@dataclass
class WindowDescriptor:
    key: str
    title: str
    visible: bool
    on_close: Optional[Callback] = None


class SweepState(Enum):
    OFF_SCREEN_TOP = "off-screen-top"
    SWEEPING = "sweeping"
    OFF_SCREEN_BOTTOM_RESET = "off-screen-bottom-reset"
