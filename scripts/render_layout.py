"""
Render one keypad layout to a PNG, for checking layouts without a display.

Usage:
    python scripts/render_layout.py --seed 7 --variable --enter -o layout.png
"""
import argparse
import random
import sys
from pathlib import Path

from PIL import Image, ImageDraw

# Project root on the path so the script runs from a checkout
sys.path.append(str(Path(__file__).parent.parent.resolve()))

from scrambled_keypad.core.keypad import ScrambledKeypad  # noqa: E402
from scrambled_keypad.core.keypad_config import KeypadConfig  # noqa: E402
from scrambled_keypad.ui.keypad_view import grid_height, layout_boxes  # noqa: E402
from scrambled_keypad.ui.styles import Colors, Layout  # noqa: E402


def render_layout(keypad, width=Layout.KEYPAD_WIDTH, margin=16):
    config = keypad.config
    height = grid_height(len(keypad.rows), config.key_height, config.spacing)
    img = Image.new("RGB", (int(width + margin * 2), int(height + margin * 2)),
                    color=Colors.BACKGROUND)
    draw = ImageDraw.Draw(img)

    boxes = layout_boxes(keypad.rows, keypad.row_units, width,
                         config.spacing, config.key_height)
    for x1, y1, x2, y2, cell in boxes:
        enabled = keypad.is_enabled(cell.key)
        fill = Colors.KEY_FILL if enabled else Colors.KEY_FILL_DISABLED
        text_color = Colors.KEY_TEXT if enabled else Colors.KEY_TEXT_DISABLED
        box = [x1 + margin, y1 + margin, x2 + margin, y2 + margin]
        draw.rounded_rectangle(box, radius=10, fill=fill, outline=Colors.KEY_OUTLINE)
        # Default bitmap font is ASCII only
        label = cell.key.label if cell.key.value is not None else cell.key.kind.value.upper()
        left, top, right, bottom = draw.textbbox((0, 0), label)
        cx, cy = (box[0] + box[2]) / 2, (box[1] + box[3]) / 2
        draw.text((cx - (right - left) / 2, cy - (bottom - top) / 2), label, fill=text_color)
    return img


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render a scrambled keypad layout")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--variable", action="store_true", help="variable key sizes")
    parser.add_argument("--enter", action="store_true", help="include the enter key")
    parser.add_argument("-o", "--output", default="layout.png")
    args = parser.parse_args(argv)

    keypad = ScrambledKeypad(
        on_key_press=lambda digit: None,
        on_delete=lambda: None,
        include_enter=args.enter,
        enable_size_variation=args.variable,
        config=KeypadConfig.load(),
        rng=random.Random(args.seed),
    )
    keypad.mount()

    img = render_layout(keypad)
    img.save(args.output)
    print(f"✓ Layout written to {args.output} ({len(keypad.rows)} rows)")


if __name__ == '__main__':
    main()
