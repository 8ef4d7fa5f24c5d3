"""Style - foreground, background and bold attributes of a cell."""

import logging
from dataclasses import dataclass, replace
from typing import ClassVar, Iterable

from bbs_screen.core.constants import CSI

logger = logging.getLogger(__name__)

# SGR "default color" codes double as the unset value
DEFAULT_FG = 39
DEFAULT_BG = 49


@dataclass(frozen=True, slots=True)
class Style:
    """
    Immutable text style as tracked by the rasterizer.

    Colors are stored as their SGR codes (30-37/90-97 foreground,
    40-47/100-107 background), with 39/49 meaning "terminal default".
    """
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    bold: bool = False

    DEFAULT: ClassVar["Style"]

    @property
    def is_default(self) -> bool:
        return self.fg == DEFAULT_FG and self.bg == DEFAULT_BG and not self.bold

    def apply_sgr(self, params: Iterable[int]) -> "Style":
        """Return the style produced by an SGR parameter list.

        An empty list is a full reset. Unrecognized codes are skipped.
        """
        params = list(params)
        if not params:
            return Style.DEFAULT

        style = self
        for p in params:
            if p == 0:
                style = Style.DEFAULT
            elif p == 1:
                style = replace(style, bold=True)
            elif p == 22:
                style = replace(style, bold=False)
            elif p == 39:
                style = replace(style, fg=DEFAULT_FG)
            elif p == 49:
                style = replace(style, bg=DEFAULT_BG)
            elif 30 <= p <= 37 or 90 <= p <= 97:
                style = replace(style, fg=p)
            elif 40 <= p <= 47 or 100 <= p <= 107:
                style = replace(style, bg=p)
            else:
                logger.debug("Ignoring SGR code %d", p)
        return style

    def sgr_params(self) -> list[str]:
        """Minimal SGR parameters for this style, starting with a reset."""
        params = ["0"]
        if self.bold:
            params.append("1")
        if self.fg != DEFAULT_FG:
            params.append(str(self.fg))
        if self.bg != DEFAULT_BG:
            params.append(str(self.bg))
        return params

    def to_sgr(self) -> str:
        """Return the escape sequence that switches any state to this style."""
        return f"{CSI}{';'.join(self.sgr_params())}m"


Style.DEFAULT = Style()
