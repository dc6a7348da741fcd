"""
Keypad UI design constants.

Colours, fonts and sizes for the demo window, kept in one place.
"""


class Colors:
    """Colour palette"""
    BACKGROUND = "#f5f5f5"
    KEY_FILL = "#e4e4e4"
    KEY_FILL_PRESSED = "#cfcfcf"
    KEY_OUTLINE = "#c8c8c8"
    KEY_TEXT = "#222222"
    KEY_TEXT_DISABLED = "#aaaaaa"
    KEY_FILL_DISABLED = "#efefef"

    DOT_EMPTY = "#ffffff"
    DOT_FILLED = "#222222"
    DOT_OUTLINE = "#b0b0b0"

    SUCCESS = "#1e9e3a"
    ERROR = "#cc0000"
    HINT = "#777777"

    SMUDGE = "#f2b8b8"


class Fonts:
    """Font definitions"""
    FAMILY = "Helvetica"

    SIZE_TITLE = 20
    SIZE_DIGIT = 22
    SIZE_AUX = 14
    SIZE_BODY = 14
    SIZE_SMALL = 11

    @staticmethod
    def title():
        return (Fonts.FAMILY, Fonts.SIZE_TITLE, "bold")

    @staticmethod
    def digit():
        return (Fonts.FAMILY, Fonts.SIZE_DIGIT, "bold")

    @staticmethod
    def aux():
        return (Fonts.FAMILY, Fonts.SIZE_AUX, "bold")

    @staticmethod
    def body():
        return (Fonts.FAMILY, Fonts.SIZE_BODY, "bold")

    @staticmethod
    def small():
        return (Fonts.FAMILY, Fonts.SIZE_SMALL)


class Layout:
    """Layout constants"""
    KEYPAD_WIDTH = 360
    PADDING = 24
    DOT_SIZE = 16
    DOT_GAP = 12
    SMUDGE_RADIUS = 15

    # Press feedback highlight (ms)
    PRESS_FEEDBACK_MS = 120

    # Frames used to interpolate scramble offsets
    ANIMATION_STEPS = 4
