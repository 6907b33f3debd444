"""Frame rendering: SD-card style bitmap animations with a drawn fallback."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pocketpet.config import ANIM_TICK_MS, SCREEN_HEIGHT, SCREEN_WIDTH
from pocketpet.types import Emotion, PetState, Stage

log = logging.getLogger(__name__)

FRAME_BYTES = SCREEN_WIDTH * SCREEN_HEIGHT // 8
CHAR_WIDTH = 6
PROCEDURAL_FRAMES = 50

_STAGE_SIZES = {
    Stage.EGG: 8,
    Stage.BABY: 10,
    Stage.CHILD: 12,
    Stage.TEEN: 14,
    Stage.ADULT: 16,
}


class Canvas:
    """A monochrome pixel buffer with simple drawing primitives."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)
        self.texts: list[tuple[int, int, str]] = []

    def clear(self) -> None:
        """Turn every pixel off and forget all text."""
        self._pixels = bytearray(self.width * self.height)
        self.texts.clear()

    def pixel(self, x: int, y: int, on: bool) -> None:
        """Set one pixel; points outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y * self.width + x] = 1 if on else 0

    def get_pixel(self, x: int, y: int) -> bool:
        """True when the pixel is lit; False outside the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self._pixels[y * self.width + x])
        return False

    def _vline(self, x: int, y: int, h: int, on: bool) -> None:
        for yy in range(y, y + h):
            self.pixel(x, yy, on)

    def fill_rect(self, x: int, y: int, w: int, h: int, on: bool) -> None:
        for yy in range(y, y + h):
            for xx in range(x, x + w):
                self.pixel(xx, yy, on)

    def draw_rect(self, x: int, y: int, w: int, h: int, on: bool) -> None:
        """Outline of a ``w`` by ``h`` rectangle."""
        if w <= 0 or h <= 0:
            return
        for xx in range(x, x + w):
            self.pixel(xx, y, on)
            self.pixel(xx, y + h - 1, on)
        for yy in range(y, y + h):
            self.pixel(x, yy, on)
            self.pixel(x + w - 1, yy, on)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, on: bool) -> None:
        """Bresenham line including both end points."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self.pixel(x0, y0, on)
            if x0 == x1 and y0 == y1:
                return
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def fill_circle(self, cx: int, cy: int, r: int, on: bool) -> None:
        """Filled circle of radius ``r`` built from vertical spans."""
        self._vline(cx, cy - r, 2 * r + 1, on)
        f = 1 - r
        ddf_x = 1
        ddf_y = -2 * r
        x, y = 0, r
        px, py = x, y
        while x < y:
            if f >= 0:
                y -= 1
                ddf_y += 2
                f += ddf_y
            x += 1
            ddf_x += 2
            f += ddf_x
            if x < y + 1:
                self._vline(cx + x, cy - y, 2 * y + 1, on)
                self._vline(cx - x, cy - y, 2 * y + 1, on)
            if y != py:
                self._vline(cx + py, cy - px, 2 * px + 1, on)
                self._vline(cx - py, cy - px, 2 * px + 1, on)
                py = y
            px = x

    def draw_bitmap(self, x: int, y: int, data: bytes, w: int, h: int, on: bool) -> None:
        """Draw a row-major, MSB-first 1-bit image; clear bits leave pixels alone."""
        byte_width = (w + 7) // 8
        if len(data) < byte_width * h:
            raise ValueError(f"bitmap needs {byte_width * h} bytes, got {len(data)}")
        for row in range(h):
            base = row * byte_width
            for col in range(w):
                if data[base + col // 8] & (0x80 >> (col % 8)):
                    self.pixel(x + col, y + row, on)

    def print_text(self, x: int, y: int, text: str) -> int:
        """Place a text label at ``x, y``; returns the x just after it."""
        self.texts.append((x, y, text))
        return x + CHAR_WIDTH * len(text)


def _heart(canvas: Canvas, x: int, y: int) -> None:
    canvas.fill_rect(x, y + 1, 2, 1, True)
    canvas.fill_rect(x + 3, y + 1, 2, 1, True)
    canvas.fill_rect(x - 1, y + 2, 7, 2, True)
    canvas.fill_rect(x, y + 4, 5, 1, True)
    canvas.fill_rect(x + 1, y + 5, 3, 1, True)
    canvas.pixel(x + 2, y + 6, True)


def _status_bars(canvas: Canvas, pet: PetState) -> None:
    bar_y = SCREEN_HEIGHT - 16
    bar_w = SCREEN_WIDTH - 4
    bar_h = 3
    spacing = 4
    for value in (pet.st.hunger, pet.st.energy, pet.st.happiness):
        canvas.draw_rect(2, bar_y, bar_w, bar_h, True)
        canvas.fill_rect(2, bar_y, value * bar_w // 100, bar_h, True)
        bar_y += spacing


def _eyes(canvas: Canvas, cx: int, eye_y: int, size: int) -> None:
    canvas.fill_circle(cx - size // 3, eye_y, 2, False)
    canvas.fill_circle(cx + size // 3, eye_y, 2, False)


def _mouth_curve(canvas: Canvas, cx: int, base_y: int, size: int, smile: bool) -> None:
    span = size // 3
    for i in range(-span, span + 1):
        bend = (i * i) // (size * 2)
        y = base_y + bend if smile else base_y - bend
        if 0 <= y < SCREEN_HEIGHT:
            canvas.pixel(cx + i, y, False)


def draw_procedural(canvas: Canvas, pet: PetState, frame: int) -> None:
    """Draw a bouncing blob whose face follows the pet's emotion, with status bars."""
    cx = SCREEN_WIDTH // 2
    cy = SCREEN_HEIGHT // 2
    bounce = frame % 10 if frame % 20 < 10 else 10 - frame % 10
    size = _STAGE_SIZES.get(pet.stage, 10)
    pet_y = cy + bounce // 2 - 10

    canvas.fill_circle(cx, pet_y, size, True)
    eye_y = pet_y - size // 3
    emotion = pet.emotion

    if emotion in (Emotion.SLEEPY, Emotion.TIRED):
        if frame % 20 < 15:
            for side in (-1, 1):
                ex = cx + side * (size // 3)
                canvas.draw_line(ex - 2, eye_y, ex + 2, eye_y, False)
        else:
            _eyes(canvas, cx, eye_y, size)
    elif emotion in (Emotion.HAPPY, Emotion.EXCITED, Emotion.PLAYFUL):
        _eyes(canvas, cx, eye_y, size)
        _mouth_curve(canvas, cx, pet_y + size // 4, size, smile=True)
    elif emotion in (Emotion.SAD, Emotion.SICK):
        _eyes(canvas, cx, eye_y, size)
        _mouth_curve(canvas, cx, pet_y + size // 2, size, smile=False)
    elif emotion in (Emotion.HUNGRY, Emotion.THIRSTY):
        _eyes(canvas, cx, eye_y, size)
        canvas.fill_rect(cx - 3, pet_y + size // 4, 6, 4, False)
    elif emotion == Emotion.ANGRY:
        _eyes(canvas, cx, eye_y, size)
        left = cx - size // 3
        right = cx + size // 3
        canvas.draw_line(left - 3, eye_y - 3, left + 1, eye_y - 1, False)
        canvas.draw_line(right - 1, eye_y - 1, right + 3, eye_y - 3, False)
    else:
        _eyes(canvas, cx, eye_y, size)
        mouth_y = pet_y + size // 3
        canvas.draw_line(cx - size // 4, mouth_y, cx + size // 4, mouth_y, False)

    _status_bars(canvas, pet)

    canvas.print_text(2, 2, pet.stage.name)
    canvas.print_text(2, 12, pet.emotion.name)
    if pet.st.happiness > 70:
        _heart(canvas, SCREEN_WIDTH - 8, 2)
    if pet.st.sleeping:
        canvas.print_text(SCREEN_WIDTH - 20, 12, "zzZ")
    if pet.st.health < 40:
        canvas.print_text(SCREEN_WIDTH - 10, 22, "!")


def draw_status_overlay(canvas: Canvas, pet: PetState) -> None:
    """Draw status bars and icons on top of a loaded animation frame."""
    canvas.fill_rect(0, SCREEN_HEIGHT - 18, SCREEN_WIDTH, 18, False)
    _status_bars(canvas, pet)

    if pet.st.sleeping:
        canvas.fill_rect(SCREEN_WIDTH - 22, 0, 22, 10, False)
        canvas.print_text(SCREEN_WIDTH - 20, 2, "zzZ")
    if pet.st.health < 40:
        canvas.fill_rect(SCREEN_WIDTH - 12, 10, 12, 10, False)
        canvas.print_text(SCREEN_WIDTH - 10, 12, "!")
    if pet.st.happiness > 70:
        x, y = SCREEN_WIDTH - 8, 22
        canvas.fill_rect(x - 2, y, 10, 8, False)
        _heart(canvas, x, y)


class Animator:
    """Plays ``anim/<STAGE>/<EMOTION>/fNNN.bin`` frames from a card directory."""

    def __init__(
        self,
        root: str | os.PathLike[str] | None = None,
        canvas: Canvas | None = None,
    ) -> None:
        self.root = Path(root) if root is not None else None
        self.canvas = canvas if canvas is not None else Canvas()
        self.frame = 0
        self.last_anim_ms = 0
        self._cache_key: tuple[Stage, Emotion, int] | None = None
        self._frame_data = b""
        if self.root is not None and not (self.root / "anim").is_dir():
            log.warning("anim folder not found; expected anim/<stage>/<emotion>/f000.bin")

    def _frame_path(self, stage: Stage, emotion: Emotion, index: int) -> Path:
        assert self.root is not None
        return self.root / "anim" / stage.name / emotion.name / f"f{index:03d}.bin"

    def load_frame(self, stage: Stage, emotion: Emotion, index: int) -> bytes | None:
        """Bytes of one frame, or None when it is missing or malformed."""
        if self.root is None:
            return None
        key = (stage, emotion, index)
        if self._cache_key == key:
            return self._frame_data

        path = self._frame_path(stage, emotion, index)
        if not path.is_file():
            rel = Path(str(path.relative_to(self.root)).lower())
            path = self.root / rel
            if not path.is_file():
                if index == 0:
                    log.info("frame not found: %s", path)
                self._cache_key = None
                return None

        data = path.read_bytes()
        if len(data) != FRAME_BYTES:
            log.warning("wrong frame size: %s (%d bytes, expected %d)", path, len(data), FRAME_BYTES)
            self._cache_key = None
            return None

        self._cache_key = key
        self._frame_data = data
        return data

    def tick(self, pet: PetState, now_ms: int) -> bool:
        """Render the next frame if its time has come; True when one was drawn."""
        if now_ms - self.last_anim_ms < ANIM_TICK_MS:
            return False
        self.last_anim_ms = now_ms
        self.canvas.clear()

        data = self.load_frame(pet.stage, pet.emotion, self.frame)
        if data is not None:
            self.canvas.draw_bitmap(0, 0, data, SCREEN_WIDTH, SCREEN_HEIGHT, True)
            draw_status_overlay(self.canvas, pet)
            self.frame += 1
            if self.load_frame(pet.stage, pet.emotion, self.frame) is None:
                self.frame = 0
        else:
            if self.frame == 0:
                log.info("using procedural fallback")
            draw_procedural(self.canvas, pet, self.frame)
            self.frame += 1
            if self.frame > PROCEDURAL_FRAMES:
                self.frame = 0
        return True

    def frame_counts(self) -> dict[tuple[Stage, Emotion], int]:
        """Number of files in each existing animation folder."""
        if self.root is None:
            return {}
        counts: dict[tuple[Stage, Emotion], int] = {}
        for stage in Stage:
            for emotion in Emotion:
                folder = self.root / "anim" / stage.name / emotion.name
                if folder.is_dir():
                    counts[(stage, emotion)] = sum(1 for _ in folder.iterdir())
        return counts