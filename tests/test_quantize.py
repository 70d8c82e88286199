import numpy as np
import pytest
from pcut import quantize
from pcut.errors import ConfigurationError, EmptyBucketError
from pcut.pixels import ColorRecord


def random_pixels(count, seed=7):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(count, 4), dtype=np.uint8)


@pytest.mark.parametrize("max_depth", [1, 2, 3, 5])
def test_quantize_returns_power_of_two_palette(max_depth):
    palette = quantize.quantize(random_pixels(500), max_depth)

    assert len(palette) == 2 ** max_depth
    for color in palette:
        assert isinstance(color, ColorRecord)
        assert all(0 <= c <= 255 for c in color.rgb)
        assert color.a == 255


def test_median_cut_buckets_are_exhaustive():
    population = random_pixels(1001)
    buckets = quantize.median_cut(population, 3)

    assert len(buckets) == 8
    assert sum(len(b) for b in buckets) == len(population)
    # same multiset of pixels, just reordered
    merged = np.concatenate(buckets)
    assert sorted(map(tuple, merged.tolist())) == sorted(map(tuple, population.tolist()))


def test_quantize_averages_with_half_up_rounding():
    colors = [(10, 0, 0), (200, 0, 0), (20, 5, 0), (190, 5, 0)]

    palette = quantize.quantize(colors, 1)

    # red spreads most, so the split is low reds | high reds; g means are 2.5
    assert palette == [ColorRecord(15, 3, 0), ColorRecord(195, 3, 0)]


def test_quantize_uniform_population_repeats_that_color():
    palette = quantize.quantize([(42, 43, 44)] * 16, 2)
    assert palette == [ColorRecord(42, 43, 44)] * 4


def test_left_bucket_gets_the_smaller_half():
    buckets = quantize.median_cut([(i, 0, 0) for i in range(5)], 1)
    assert [len(b) for b in buckets] == [2, 3]
    assert buckets[0][:, 0].tolist() == [0, 1]


def test_stable_sort_preserves_scan_order_of_equal_values():
    colors = [(50, 1, 0), (10, 2, 0), (50, 3, 0), (10, 4, 0)]

    left, right = quantize.median_cut(colors, 1)

    assert left[:, :2].tolist() == [[10, 2], [10, 4]]
    assert right[:, :2].tolist() == [[50, 1], [50, 3]]


def test_dominant_channel_picks_widest_spread():
    bucket = np.array([[0, 0, 0, 255], [10, 90, 40, 255]], dtype=np.uint8)
    assert quantize.dominant_channel(bucket) == 1


def test_dominant_channel_tie_prefers_red_then_green():
    red_green_tie = np.array([[0, 100, 0, 255], [100, 0, 0, 255]], dtype=np.uint8)
    green_blue_tie = np.array([[5, 0, 100, 255], [5, 100, 0, 255]], dtype=np.uint8)

    assert quantize.dominant_channel(red_green_tie) == 0
    assert quantize.dominant_channel(green_blue_tie) == 1


def test_quantize_does_not_reorder_callers_array():
    population = random_pixels(64)
    snapshot = population.copy()
    quantize.quantize(population, 3)
    np.testing.assert_array_equal(population, snapshot)


def test_quantize_is_deterministic():
    population = random_pixels(300, seed=99)
    assert quantize.quantize(population, 4) == quantize.quantize(population.copy(), 4)


def test_starting_depth_shrinks_palette():
    assert len(quantize.quantize(random_pixels(100), 3, starting_depth=1)) == 4


@pytest.mark.parametrize("max_depth, starting_depth", [(0, 0), (2, 2), (1, 3), (-1, 0)])
def test_depths_must_leave_room_to_split(max_depth, starting_depth):
    with pytest.raises(ConfigurationError):
        quantize.quantize(random_pixels(10), max_depth, starting_depth)


def test_non_integer_depth_is_rejected():
    with pytest.raises(ConfigurationError):
        quantize.quantize(random_pixels(10), 2.0)


def test_empty_input_raises_empty_bucket():
    with pytest.raises(EmptyBucketError):
        quantize.quantize([], 2)


def test_too_few_pixels_for_depth_raises_empty_bucket():
    # 3 pixels cannot fill 4 buckets
    with pytest.raises(EmptyBucketError):
        quantize.quantize([(1, 2, 3), (4, 5, 6), (7, 8, 9)], 2)


def test_bucket_average_rejects_empty_bucket():
    with pytest.raises(EmptyBucketError):
        quantize.bucket_average(np.empty((0, 4), dtype=np.uint8))
