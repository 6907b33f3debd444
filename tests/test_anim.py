import pytest

from pocketpet.anim import (
    FRAME_BYTES,
    Animator,
    Canvas,
    draw_procedural,
    draw_status_overlay,
)
from pocketpet.config import SCREEN_HEIGHT, SCREEN_WIDTH
from pocketpet.types import Emotion, PetState, Stage, Stats


def _lit(canvas):
    return sum(
        canvas.get_pixel(x, y) for y in range(canvas.height) for x in range(canvas.width)
    )


def _pet(**stats):
    base = dict(hunger=50, thirst=50, energy=50, happiness=50, health=80)
    base.update(stats)
    return PetState(stage=Stage.EGG, emotion=Emotion.NEUTRAL, st=Stats(**base))


def _write_frame(root, stage, emotion, index, fill=0xFF, size=FRAME_BYTES):
    folder = root / "anim" / stage / emotion
    folder.mkdir(parents=True, exist_ok=True)
    (folder / f"f{index:03d}.bin").write_bytes(bytes([fill]) * size)


def test_pixel_set_get_and_bounds():
    c = Canvas()
    c.pixel(3, 4, True)
    c.pixel(-1, 0, True)
    c.pixel(SCREEN_WIDTH, 0, True)
    assert c.get_pixel(3, 4) is True
    assert c.get_pixel(-1, 0) is False
    assert _lit(c) == 1
    c.pixel(3, 4, False)
    assert _lit(c) == 0


def test_fill_and_outline_rect_counts():
    c = Canvas()
    c.fill_rect(10, 10, 5, 4, True)
    assert _lit(c) == 5 * 4
    c.clear()
    c.draw_rect(10, 10, 5, 4, True)
    assert _lit(c) == 2 * 5 + 2 * 4 - 4
    assert not c.get_pixel(12, 11)


def test_draw_line_endpoints_and_length():
    c = Canvas()
    c.draw_line(0, 0, 9, 0, True)
    assert _lit(c) == 10
    c.clear()
    c.draw_line(5, 5, 0, 0, True)
    assert all(c.get_pixel(i, i) for i in range(6))
    assert _lit(c) == 6


def test_fill_circle_extent_and_symmetry():
    c = Canvas()
    c.fill_circle(30, 30, 6, True)
    assert c.get_pixel(30, 30)
    assert c.get_pixel(36, 30) and c.get_pixel(24, 30)
    assert c.get_pixel(30, 24) and c.get_pixel(30, 36)
    assert not c.get_pixel(37, 30)
    assert not c.get_pixel(30, 37)
    for y in range(20, 41):
        for d in range(0, 10):
            assert c.get_pixel(30 + d, y) == c.get_pixel(30 - d, y)


def test_draw_bitmap_msb_first_and_transparent():
    c = Canvas()
    c.pixel(5, 0, True)
    c.draw_bitmap(0, 0, bytes([0x80, 0x01]), 16, 1, True)
    assert c.get_pixel(0, 0)
    assert c.get_pixel(15, 0)
    assert c.get_pixel(5, 0)
    assert _lit(c) == 3


def test_draw_bitmap_rejects_short_data():
    with pytest.raises(ValueError):
        Canvas().draw_bitmap(0, 0, b"\x00", 16, 2, True)


def test_print_text_records_label():
    c = Canvas()
    end = c.print_text(2, 12, "zzZ")
    assert c.texts == [(2, 12, "zzZ")]
    assert end > 2
    c.clear()
    assert c.texts == []


def test_procedural_draws_names_and_bars():
    c = Canvas()
    draw_procedural(c, _pet(hunger=100), 0)
    assert (2, 2, "EGG") in c.texts
    assert (2, 12, "NEUTRAL") in c.texts
    bar_y = SCREEN_HEIGHT - 16
    assert c.get_pixel(60, bar_y + 1)
    c.clear()
    draw_procedural(c, _pet(hunger=0), 0)
    assert not c.get_pixel(60, bar_y + 1)
    assert c.get_pixel(2, bar_y + 1)


def test_procedural_icons_follow_state():
    c = Canvas()
    draw_procedural(c, _pet(sleeping=True, health=20), 3)
    labels = [text for _, _, text in c.texts]
    assert "zzZ" in labels
    assert "!" in labels


def test_overlay_clears_bottom_of_frame():
    c = Canvas()
    c.fill_rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, True)
    draw_status_overlay(c, _pet(hunger=0, energy=0, happiness=0))
    assert c.get_pixel(0, 0)
    assert not c.get_pixel(0, SCREEN_HEIGHT - 1)
    assert not c.get_pixel(60, SCREEN_HEIGHT - 15)


def test_load_frame_found_missing_and_wrong_size(tmp_path):
    _write_frame(tmp_path, "EGG", "NEUTRAL", 0, fill=0xAA)
    _write_frame(tmp_path, "EGG", "HAPPY", 0, size=10)
    anim = Animator(tmp_path)
    data = anim.load_frame(Stage.EGG, Emotion.NEUTRAL, 0)
    assert data == bytes([0xAA]) * FRAME_BYTES
    assert anim.load_frame(Stage.EGG, Emotion.NEUTRAL, 1) is None
    assert anim.load_frame(Stage.EGG, Emotion.HAPPY, 0) is None


def test_load_frame_lowercase_fallback(tmp_path):
    _write_frame(tmp_path, "baby", "sad", 0, fill=0x0F)
    anim = Animator(tmp_path)
    assert anim.load_frame(Stage.BABY, Emotion.SAD, 0) == bytes([0x0F]) * FRAME_BYTES


def test_no_card_means_no_frames():
    anim = Animator()
    assert anim.load_frame(Stage.EGG, Emotion.NEUTRAL, 0) is None
    assert anim.frame_counts() == {}


def test_tick_throttles_and_cycles(tmp_path):
    _write_frame(tmp_path, "EGG", "NEUTRAL", 0)
    _write_frame(tmp_path, "EGG", "NEUTRAL", 1)
    anim = Animator(tmp_path)
    pet = _pet()
    assert anim.tick(pet, 100) is True
    assert anim.frame == 1
    assert anim.canvas.get_pixel(0, 0)
    assert anim.tick(pet, 120) is False
    assert anim.tick(pet, 200) is True
    assert anim.frame == 0


def test_tick_procedural_fallback_wraps(tmp_path):
    anim = Animator(tmp_path)
    pet = _pet()
    now = 0
    for _ in range(51):
        now += 100
        assert anim.tick(pet, now)
    assert anim.frame == 0
    assert (2, 2, "EGG") in anim.canvas.texts


def test_frame_counts(tmp_path):
    _write_frame(tmp_path, "EGG", "NEUTRAL", 0)
    _write_frame(tmp_path, "EGG", "NEUTRAL", 1)
    _write_frame(tmp_path, "ADULT", "ANGRY", 0)
    counts = Animator(tmp_path).frame_counts()
    assert counts == {(Stage.EGG, Emotion.NEUTRAL): 2, (Stage.ADULT, Emotion.ANGRY): 1}