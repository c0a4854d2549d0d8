from concurrent.futures import ThreadPoolExecutor

import pytest

from reaper_icon_forge.core.color import ColorAdjuster
from reaper_icon_forge.core.geometry import GeometryOps
from reaper_icon_forge.core.icon_generator import IconGenerator
from reaper_icon_forge.core.models import (
    OFF_ADJUSTMENTS,
    HSBAdjustment,
    IconScale,
    TrackIconSize,
)

from conftest import gradient, logo, solid

IDENTITY = (HSBAdjustment(), HSBAdjustment(), HSBAdjustment())


@pytest.mark.parametrize("scale,expected", [
    (IconScale.SCALE_100, (90, 30)),
    (IconScale.SCALE_150, (135, 45)),
    (IconScale.SCALE_200, (180, 60)),
])
def test_toolbar_icon_sheet_size(source, scale, expected):
    sheet = IconGenerator.generate_toolbar_icon(source, scale, OFF_ADJUSTMENTS)
    assert sheet.size == expected == scale.sheet_size


@pytest.mark.parametrize("padding", [0.0, 0.1, 0.35])
def test_toolbar_icon_size_with_padding(source, padding):
    sheet = IconGenerator.generate_toolbar_icon(source, IconScale.SCALE_150, OFF_ADJUSTMENTS, padding)
    assert sheet.size == (135, 45)


def test_toolbar_icon_without_padding_scales_then_adjusts(source):
    sheet = IconGenerator.generate_toolbar_icon(source, IconScale.SCALE_100, OFF_ADJUSTMENTS)
    tile = GeometryOps.scale_exact(GeometryOps.crop_to_square(source), 30, 30)
    for index, adjustment in enumerate(OFF_ADJUSTMENTS):
        assert sheet.region(index * 30, 0, 30, 30) == ColorAdjuster.adjust_hsb(tile, adjustment)


def test_toolbar_icon_with_padding_adjusts_then_scales(source):
    sheet = IconGenerator.generate_toolbar_icon(source, IconScale.SCALE_100, OFF_ADJUSTMENTS, 0.1)
    squared = GeometryOps.crop_to_square(source)
    hover = GeometryOps.scale_with_padding(
        ColorAdjuster.adjust_hsb(squared, OFF_ADJUSTMENTS.hover), 30, 30, 0.1
    )
    assert sheet.region(30, 0, 30, 30) == hover
    # padding stays transparent in every tile
    assert sheet.pixel(0, 0)[3] == 0
    assert sheet.pixel(89, 29)[3] == 0


def test_toolbar_states_differ_with_default_adjustments(square_logo):
    sheet = IconGenerator.generate_toolbar_icon(square_logo, IconScale.SCALE_100, OFF_ADJUSTMENTS)
    centers = [sheet.pixel(15 + i * 30, 15) for i in range(3)]
    assert len(set(centers)) == 3


def test_manual_toolbar_icon_uses_each_image():
    red = solid(50, 40, (255, 0, 0, 255))
    green = solid(40, 50, (0, 255, 0, 255))
    blue = solid(64, 64, (0, 0, 255, 255))

    sheet = IconGenerator.generate_toolbar_icon_manual((red, green, blue), IconScale.SCALE_200)

    assert sheet.size == (180, 60)
    assert sheet.pixel(30, 30) == (255, 0, 0, 255)
    assert sheet.pixel(90, 30) == (0, 255, 0, 255)
    assert sheet.pixel(150, 30) == (0, 0, 255, 255)


def test_manual_toolbar_icon_with_padding():
    tile_source = solid(20, 20, (9, 9, 9, 255))
    sheet = IconGenerator.generate_toolbar_icon_manual((tile_source,) * 3, IconScale.SCALE_100, 0.2)
    assert sheet.pixel(1, 1)[3] == 0
    assert sheet.pixel(15, 15) == (9, 9, 9, 255)


@pytest.mark.parametrize("size", list(TrackIconSize))
def test_track_icon_size(source, size):
    icon = IconGenerator.generate_track_icon(source, size)
    assert icon.size == (size.value, size.value)


def test_track_icon_has_no_color_adjustment():
    icon = IconGenerator.generate_track_icon(solid(300, 200, (12, 34, 56, 255)), TrackIconSize.SIZE_64)
    assert icon.pixel(32, 32) == (12, 34, 56, 255)


def test_preview_scales_then_adjusts(source):
    adjustment = HSBAdjustment(0.2, 0.1, 0.05)
    preview = IconGenerator.generate_preview(source, adjustment, 48)
    expected = ColorAdjuster.adjust_hsb(
        GeometryOps.scale_exact(GeometryOps.crop_to_square(source), 48, 48), adjustment
    )
    assert preview == expected


def test_state_previews_follow_adjustments(square_logo):
    previews = IconGenerator.generate_state_previews(square_logo, IDENTITY, 32)
    assert previews.normal == previews.hover == previews.active


def test_prepare_state_tile(source):
    assert IconGenerator.prepare_state_tile(source, 45).size == (45, 45)
    assert IconGenerator.prepare_state_tile(source, 45, 0.2).pixel(0, 0)[3] == 0


def test_generators_are_deterministic(source):
    first = IconGenerator.generate_toolbar_icon(source, IconScale.SCALE_150, OFF_ADJUSTMENTS, 0.1)
    second = IconGenerator.generate_toolbar_icon(source, IconScale.SCALE_150, OFF_ADJUSTMENTS, 0.1)
    assert first.pixels == second.pixels

    assert IconGenerator.generate_track_icon(source, TrackIconSize.SIZE_128).pixels == \
        IconGenerator.generate_track_icon(source, TrackIconSize.SIZE_128).pixels

    images = (source, gradient(30, 50), logo(64))
    assert IconGenerator.generate_toolbar_icon_manual(images, IconScale.SCALE_200, 0.15).pixels == \
        IconGenerator.generate_toolbar_icon_manual(images, IconScale.SCALE_200, 0.15).pixels

    hover = OFF_ADJUSTMENTS.hover
    assert IconGenerator.generate_preview(source, hover, 96).pixels == \
        IconGenerator.generate_preview(source, hover, 96).pixels


def test_generators_run_concurrently():
    sources = [gradient(40 + i, 30 + i) for i in range(4)]
    sequential = [
        IconGenerator.generate_toolbar_icon(s, IconScale.SCALE_200, OFF_ADJUSTMENTS) for s in sources
    ]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(
            lambda s: IconGenerator.generate_toolbar_icon(s, IconScale.SCALE_200, OFF_ADJUSTMENTS),
            sources,
        ))
    assert parallel == sequential


def test_logo_source_is_not_modified(square_logo):
    before = square_logo.pixels
    IconGenerator.generate_toolbar_icon(square_logo, IconScale.SCALE_100, OFF_ADJUSTMENTS, 0.1)
    assert square_logo.pixels == before
    assert logo().pixels == before


def test_adjust_states_work_at_crop_size():
    states = IconGenerator.adjust_states(gradient(90, 60), OFF_ADJUSTMENTS)
    assert [state.size for state in states] == [(60, 60)] * 3

    sheet = IconGenerator.generate_toolbar_icon_padded(states, IconScale.SCALE_150, 0.1)
    assert sheet == IconGenerator.generate_toolbar_icon(gradient(90, 60), IconScale.SCALE_150,
                                                        OFF_ADJUSTMENTS, 0.1)
