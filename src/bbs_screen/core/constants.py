"""Shared constants for ANSI art processing and screen composition."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SUB: end-of-file marker written by DOS-era editors ahead of SAUCE data
EOF_MARKER = 0x1A

# Historical art target: 80 columns x 25 rows
ART_WIDTH = 80
ART_HEIGHT = 25

# Compositor defaults
ART_TOP_ROW = 2          # just under a one-line header
DEFAULT_BORDER = 1
CENTER_BLEED_ROWS = 3    # full-width rows cleared under a centered block

# CP437 upper half (0x80-0xFF) to Unicode.
# 0x00-0x7F decode as plain ASCII so ESC, CR and LF keep their control meaning.
# Source: https://en.wikipedia.org/wiki/Code_page_437
_CP437_HIGH: tuple[str, ...] = (
    'Ç', 'ü', 'é', 'â', 'ä', 'à', 'å', 'ç',
    'ê', 'ë', 'è', 'ï', 'î', 'ì', 'Ä', 'Å',
    'É', 'æ', 'Æ', 'ô', 'ö', 'ò', 'û', 'ù',
    'ÿ', 'Ö', 'Ü', '¢', '£', '¥', '₧', 'ƒ',
    'á', 'í', 'ó', 'ú', 'ñ', 'Ñ', 'ª', 'º',
    '¿', '⌐', '¬', '½', '¼', '¡', '«', '»',
    '░', '▒', '▓', '│', '┤', '╡', '╢', '╖',
    '╕', '╣', '║', '╗', '╝', '╜', '╛', '┐',
    '└', '┴', '┬', '├', '─', '┼', '╞', '╟',
    '╚', '╔', '╩', '╦', '╠', '═', '╬', '╧',
    '╨', '╤', '╥', '╙', '╘', '╒', '╓', '╫',
    '╪', '┘', '┌', '█', '▄', '▌', '▐', '▀',
    'α', 'ß', 'Γ', 'π', 'Σ', 'σ', 'µ', 'τ',
    'Φ', 'Θ', 'Ω', 'δ', '∞', 'φ', 'ε', '∩',
    '≡', '±', '≥', '≤', '⌠', '⌡', '÷', '≈',
    '°', '∙', '·', '√', 'ⁿ', '²', '■', '\u00A0',
)

CP437_TO_UNICODE: tuple[str, ...] = tuple(chr(b) for b in range(0x80)) + _CP437_HIGH

# Block drawing characters (common CP437 art characters)
BLOCK = {
    "full": "█",       # 219/0xDB - Full block
    "upper": "▀",      # 223/0xDF - Upper half block
    "lower": "▄",      # 220/0xDC - Lower half block
    "light": "░",      # 176/0xB0 - Light shade
    "medium": "▒",     # 177/0xB1 - Medium shade
    "dark": "▓",       # 178/0xB2 - Dark shade
}
