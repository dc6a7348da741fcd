"""
Keypad canvas view

Design intent:
- Draws whatever rows/offsets the ScrambledKeypad publishes; holds no layout logic
- Geometry is a pure function (layout_boxes) so it can be checked without a display
- Clicks are hit-tested against the drawn boxes and forwarded to keypad.press()
"""
import tkinter as tk

from scrambled_keypad.core.keypad import RESTYLE
from scrambled_keypad.core.keys import Offset
from scrambled_keypad.core.layout_engine import LayoutEngine
from scrambled_keypad.core.scramble_sequencer import EASE_OUT
from scrambled_keypad.ui.styles import Colors, Fonts, Layout


def layout_boxes(rows, row_units, width, spacing, key_height):
    """
    Resting rectangles of every non-spacer cell.

    Returns:
        list of (x1, y1, x2, y2, cell)
    """
    unit_width = LayoutEngine.unit_width(row_units, width, spacing)
    boxes = []
    for row_idx, row in enumerate(rows):
        y = row_idx * (key_height + spacing)
        x = 0.0
        for cell in row.cells:
            cell_w = LayoutEngine.cell_width(cell.span, unit_width, spacing)
            if not cell.is_spacer:
                boxes.append((x, y, x + cell_w, y + key_height, cell))
            x += cell_w + spacing
    return boxes


def grid_height(row_count, key_height, spacing):
    row_count = max(row_count, 1)
    return key_height * row_count + spacing * (row_count - 1)


class KeypadView:

    def __init__(self, root, keypad, width=Layout.KEYPAD_WIDTH, on_touch=None):
        self.root = root
        self.keypad = keypad
        self.width = width
        self.on_touch = on_touch

        self.canvas = tk.Canvas(
            root, bg=Colors.BACKGROUND, highlightthickness=0,
            width=width, height=self._height()
        )
        self.canvas.bind("<Button-1>", self._on_click)

        self.touch_markers = []
        self.show_markers = True

        self._drawn_offsets = {}
        self._hit_boxes = []
        self._pressed_id = None
        self._press_timer = None
        self._anim_timer = None

        keypad.add_listener(self._on_keypad_change)

    def pack(self, **kwargs):
        self.canvas.pack(**kwargs)

    def _height(self):
        config = self.keypad.config
        return grid_height(len(self.keypad.rows), config.key_height, config.spacing)

    def _on_keypad_change(self, keypad, transition):
        if transition == RESTYLE:
            # Enabled state only; an in-flight offset animation keeps running
            self.render()
            return

        target = dict(keypad.offsets)
        if transition is None:
            self._cancel_animation()
            self._drawn_offsets = target
            self.render()
            return

        config = keypad.config
        duration = config.out_duration_ms if transition == EASE_OUT else config.in_duration_ms
        self._animate(dict(self._drawn_offsets), target, duration)

    def _animate(self, start, target, duration_ms):
        self._cancel_animation()
        steps = Layout.ANIMATION_STEPS
        interval = max(1, duration_ms // steps)
        ids = set(start) | set(target)

        def step(i):
            t = i / steps
            drawn = {}
            for key_id in ids:
                a = start.get(key_id, Offset.ZERO)
                b = target.get(key_id, Offset.ZERO)
                drawn[key_id] = Offset(a.dx + (b.dx - a.dx) * t, a.dy + (b.dy - a.dy) * t)
            self._drawn_offsets = drawn
            self.render()
            if i < steps:
                self._anim_timer = self.root.after(interval, lambda: step(i + 1))
            else:
                self._anim_timer = None

        step(1)

    def _cancel_animation(self):
        if self._anim_timer:
            self.root.after_cancel(self._anim_timer)
            self._anim_timer = None

    def render(self):
        config = self.keypad.config
        self.canvas.delete("all")
        self.canvas.config(height=self._height())

        boxes = layout_boxes(self.keypad.rows, self.keypad.row_units, self.width,
                             config.spacing, config.key_height)
        self._hit_boxes = []
        for x1, y1, x2, y2, cell in boxes:
            off = self._drawn_offsets.get(cell.id, Offset.ZERO)
            x1, y1, x2, y2 = x1 + off.dx, y1 + off.dy, x2 + off.dx, y2 + off.dy
            self._hit_boxes.append((x1, y1, x2, y2, cell.key))
            self._draw_key(x1, y1, x2, y2, cell)

        if self.show_markers:
            r = Layout.SMUDGE_RADIUS
            for mx, my in self.touch_markers:
                self.canvas.create_oval(mx - r, my - r, mx + r, my + r,
                                        fill=Colors.SMUDGE, outline="",
                                        stipple="gray50", tags="smudge")

    def _draw_key(self, x1, y1, x2, y2, cell):
        key = cell.key
        enabled = self.keypad.is_enabled(key)
        if not enabled:
            fill, text_color = Colors.KEY_FILL_DISABLED, Colors.KEY_TEXT_DISABLED
        elif cell.id == self._pressed_id:
            fill, text_color = Colors.KEY_FILL_PRESSED, Colors.KEY_TEXT
        else:
            fill, text_color = Colors.KEY_FILL, Colors.KEY_TEXT

        self.canvas.create_rectangle(x1, y1, x2, y2, fill=fill,
                                     outline=Colors.KEY_OUTLINE, width=1, tags="key")
        font = Fonts.digit() if key.value is not None else Fonts.aux()
        self.canvas.create_text((x1 + x2) / 2, (y1 + y2) / 2, text=key.label,
                                fill=text_color, font=font, tags="key")

    def key_at(self, x, y):
        for x1, y1, x2, y2, key in self._hit_boxes:
            if x1 <= x <= x2 and y1 <= y <= y2:
                return key
        return None

    def _on_click(self, event):
        if self.show_markers:
            self.touch_markers.append((event.x, event.y))
        if self.on_touch is not None:
            self.on_touch(event.x, event.y)

        key = self.key_at(event.x, event.y)
        if key is None or not self.keypad.is_enabled(key):
            self.render()
            return

        # Press feedback, cleared shortly after
        self._pressed_id = key.id
        if self._press_timer:
            self.root.after_cancel(self._press_timer)
        self._press_timer = self.root.after(Layout.PRESS_FEEDBACK_MS, self._clear_pressed)

        self.keypad.press(key)
        self.render()

    def _clear_pressed(self):
        self._pressed_id = None
        self._press_timer = None
        self.render()

    def clear_markers(self):
        self.touch_markers = []
        self.render()

    def destroy(self):
        self._cancel_animation()
        if self._press_timer:
            self.root.after_cancel(self._press_timer)
        self.keypad.remove_listener(self._on_keypad_change)
        self.keypad.unmount()
        self.canvas.destroy()
