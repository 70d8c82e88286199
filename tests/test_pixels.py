import numpy as np
import pytest
from pcut import pixels
from pcut.errors import ConfigurationError
from pcut.pixels import ColorRecord


def test_decode_groups_bytes_and_forces_opaque_alpha():
    buffer = bytes([10, 20, 30, 0, 40, 50, 60, 128])

    decoded = pixels.decode(buffer)

    assert decoded.shape == (2, 4)
    assert decoded.dtype == np.uint8
    assert decoded.tolist() == [[10, 20, 30, 255], [40, 50, 60, 255]]


def test_decode_accepts_int_lists_and_numpy_arrays():
    as_list = pixels.decode([1, 2, 3, 4])
    as_array = pixels.decode(np.array([[1, 2, 3, 4]], dtype=np.int32))

    assert as_list.tolist() == [[1, 2, 3, 255]]
    assert as_array.tolist() == [[1, 2, 3, 255]]


def test_decode_does_not_share_memory_with_input():
    source = np.array([9, 9, 9, 9], dtype=np.uint8)
    decoded = pixels.decode(source)
    decoded[0, 0] = 0
    assert source[0] == 9


def test_decode_empty_buffer_yields_empty_sequence():
    decoded = pixels.decode(b"")
    assert decoded.shape == (0, 4)


def test_decode_rejects_partial_pixels():
    with pytest.raises(ConfigurationError):
        pixels.decode(bytes(7))


def test_decode_rejects_values_outside_a_byte():
    with pytest.raises(ConfigurationError):
        pixels.decode([0, 0, 256, 255])


def test_color_record_validates_channels():
    with pytest.raises(ConfigurationError):
        ColorRecord(300, 0, 0)
    with pytest.raises(ConfigurationError):
        ColorRecord(0, -1, 0)
    with pytest.raises(ConfigurationError):
        ColorRecord(0, 0, 1.5)


def test_color_record_defaults_to_opaque_and_renders_css():
    color = ColorRecord(200, 100, 50)
    assert color.a == 255
    assert color.rgb == (200, 100, 50)
    assert color.to_css() == "rgba(200,100,50,1)"
    assert str(ColorRecord(0, 0, 0, 0)) == "rgba(0,0,0,0)"


def test_color_record_normalizes_numpy_integers():
    color = ColorRecord(np.uint8(5), np.int64(6), 7)
    assert type(color.r) is int
    assert color == ColorRecord(5, 6, 7)


def test_as_pixels_from_records_tuples_and_rgb_arrays():
    from_records = pixels.as_pixels([ColorRecord(1, 2, 3), ColorRecord(4, 5, 6, 7)])
    from_tuples = pixels.as_pixels([(1, 2, 3), (4, 5, 6)])
    from_rgb = pixels.as_pixels(np.array([[1, 2, 3]], dtype=np.uint8))

    assert from_records.tolist() == [[1, 2, 3, 255], [4, 5, 6, 7]]
    assert from_tuples.tolist() == [[1, 2, 3, 255], [4, 5, 6, 255]]
    assert from_rgb.tolist() == [[1, 2, 3, 255]]
    assert pixels.as_pixels([]).shape == (0, 4)


def test_as_pixels_rejects_mixed_widths():
    with pytest.raises(ConfigurationError):
        pixels.as_pixels([(1, 2, 3), (1, 2)])


def test_to_records_round_trips_decoded_buffer():
    records = pixels.to_records(pixels.decode(bytes([1, 2, 3, 4, 5, 6, 7, 8])))
    assert records == [ColorRecord(1, 2, 3), ColorRecord(5, 6, 7)]
