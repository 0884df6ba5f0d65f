"""Tests for gridref module."""

import pytest

from domain.errors import InvalidFormatError, OutOfRangeError
from domain.models import BoundingBox, GeographicCoordinate, ProjectedCoordinate
from geo.gridref import (
    from_gridref,
    gridref_to_coordinates,
    parse_gridref,
    reduce_precision,
    to_gridref,
    validate_gridref,
)


class TestToGridref:
    """Tests for to_gridref function."""

    def test_southampton(self):
        """437292, 115541 should encode as SU 37292 15541."""
        ref = to_gridref({'ea': 437292, 'no': 115541})
        assert ref.letters == 'SU'
        assert ref.eastings == '37292'
        assert ref.northings == '15541'
        assert ref.text == 'SU 37292 15541'

    def test_decorative_rendering(self):
        """HTML form separates the parts with thin spaces."""
        ref = to_gridref(ProjectedCoordinate(easting=437292, northing=115541))
        assert ref.html == 'SU&thinsp;37292&thinsp;15541'

    def test_false_origin(self):
        """The south-west corner of the grid is SV 00000 00000."""
        assert to_gridref({'ea': 0, 'no': 0}).text == 'SV 00000 00000'

    def test_north_east_corner(self):
        """The north-east limit lands in JM and truncates fractions."""
        ref = to_gridref({'ea': 699999.9, 'no': 1299999.9})
        assert ref.text == 'JM 99999 99999'

    def test_offsets_zero_padded(self):
        """Offsets shorter than five digits are padded with zeros."""
        assert to_gridref({'ea': 651409, 'no': 300077}).text == 'TG 51409 00077'

    @pytest.mark.parametrize(
        ('ea', 'no', 'letters'),
        [
            (216667, 771285, 'NN'),
            (461234, 1212345, 'HP'),
            (651409, 313177, 'TG'),
            (130000, 30000, 'SW'),
        ],
    )
    def test_square_letters(self, ea, no, letters):
        """Prefix comes from the 100 km square row and column."""
        assert to_gridref({'ea': ea, 'no': no}).letters == letters

    def test_fractional_metres_floored(self):
        """Sub-metre parts are dropped, not rounded."""
        ref = to_gridref({'ea': 437292.99, 'no': 115541.5})
        assert ref.eastings == '37292'
        assert ref.northings == '15541'

    def test_negative_easting_raises(self):
        """Coordinates outside the extent raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            to_gridref({'ea': -1, 'no': 100000})

    def test_beyond_max_easting_raises(self):
        """One metre past the eastern limit is rejected."""
        with pytest.raises(OutOfRangeError):
            to_gridref({'ea': 700000.9, 'no': 0})

    def test_geographic_input_raises(self):
        """Latitude/longitude cannot be encoded directly."""
        with pytest.raises(OutOfRangeError):
            to_gridref(GeographicCoordinate(latitude=51.5, longitude=-0.1))

    def test_bounds_beyond_letter_table_raises(self):
        """Wider custom bounds still cannot index past the 13x7 table."""
        wide = BoundingBox(min_x=0, min_y=0, max_x=900000, max_y=1500000)
        with pytest.raises(OutOfRangeError, match='100 km square'):
            to_gridref({'ea': 750000, 'no': 0}, bounds=wide)


class TestFromGridref:
    """Tests for from_gridref function."""

    def test_norfolk(self):
        """TG 51409 13177 decodes to 651409, 313177."""
        coords = from_gridref('TG 51409 13177')
        assert coords == ProjectedCoordinate(ea=651409, no=313177)

    def test_southampton(self):
        coords = from_gridref('SU 37292 15541')
        assert coords.easting == 437292
        assert coords.northing == 115541

    def test_shetland(self):
        """H squares sit 1000 km north of the false origin."""
        coords = from_gridref('HP 61234 12345')
        assert coords.as_xy() == (461234, 1212345)

    def test_six_digit_reference_snaps_to_100m(self):
        """Lower precision gives the south-west corner of the square."""
        assert from_gridref('SU 373 155') == from_gridref('SU 37300 15500')

    @pytest.mark.parametrize(
        ('ref', 'expected'),
        [
            ('SU 3 1', (430000, 110000)),
            ('SU 37 15', (437000, 115000)),
            ('SU 3729 1554', (437290, 115540)),
            ('SU3715', (437000, 115000)),
        ],
    )
    def test_variable_precision(self, ref, expected):
        assert from_gridref(ref).as_xy() == expected

    @pytest.mark.parametrize(
        'ref',
        ['su 37292 15541', 'SU3729215541', 'SU 3729215541', '  SU 37292 15541  '],
    )
    def test_flexible_input(self, ref):
        """Case, optional spaces and surrounding blanks are tolerated."""
        assert from_gridref(ref).as_xy() == (437292, 115541)

    @pytest.mark.parametrize(
        'ref',
        [
            '',
            'SU',
            'SU 37292 1554',  # odd number of digits
            'SU 3729 15',  # unequal digit groups
            'AU 12 34',  # first letter not a 500 km square
            'SI 12 34',  # I is never used
            'SU 123456 123456',
            'SU  37292 15541',
            'SU\t37292 15541',
            'SU-37292-15541',
            'SU 37292 15541 X',
            'S\u212a 12345 67890',  # Kelvin sign is not K
            'SU \u0661\u0662 34',  # Arabic-Indic digits
        ],
    )
    def test_invalid_raises(self, ref):
        with pytest.raises(InvalidFormatError):
            from_gridref(ref)

    def test_error_keeps_input(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            from_gridref('XX 1 2')
        assert exc_info.value.gridref == 'XX 1 2'

    def test_decoded_result_not_bounds_checked(self):
        """Squares outside the supported extent still decode."""
        coords = from_gridref('TE 00000 00000')
        assert coords.as_xy() == (900000, 400000)
        coords = from_gridref('HE 00000 00000')
        assert coords.as_xy() == (400000, 1400000)


class TestValidateGridref:
    """Tests for validate_gridref function."""

    def test_valid(self):
        result = validate_gridref('NN 16667 71285')
        assert result.valid is True
        assert result.message == ''

    def test_invalid_message(self):
        result = validate_gridref('NN 1666 71285')
        assert result.valid is False
        assert result.message == 'Invalid grid reference.'


class TestParseGridref:
    """Tests for parse_gridref function."""

    def test_components(self):
        ref = parse_gridref('nn 166 712')
        assert ref.letters == 'NN'
        assert ref.eastings == '166'
        assert ref.northings == '712'
        assert ref.precision == 3
        assert ref.resolution_m == 100

    def test_coordinates_of_parsed_reference(self):
        ref = parse_gridref('NN 16667 71285')
        assert gridref_to_coordinates(ref).as_xy() == (216667, 771285)


class TestRoundTrip:
    """Encoding and decoding agree."""

    @pytest.mark.parametrize(
        ('ea', 'no'),
        [
            (0, 0),
            (437292, 115541),
            (651409, 313177),
            (216667, 771285),
            (461234, 1212345),
            (699999, 1299999),
            (100000, 100000),
        ],
    )
    def test_decode_encode_full_precision(self, ea, no):
        ref = to_gridref({'ea': ea, 'no': no})
        assert from_gridref(ref.text).as_xy() == (ea, no)

    @pytest.mark.parametrize(
        'text',
        ['SU 3 1', 'TG 51 13', 'NN 166 712', 'HP 6123 1234', 'SV 00000 00000'],
    )
    def test_encode_decode_keeps_letters_and_precision(self, text):
        original = parse_gridref(text)
        encoded = to_gridref(from_gridref(text))
        assert encoded.letters == original.letters
        assert reduce_precision(encoded, original.precision) == original


class TestReducePrecision:
    """Tests for reduce_precision function."""

    def test_truncates_digits(self):
        ref = reduce_precision(to_gridref({'ea': 437292, 'no': 115541}), 3)
        assert ref.text == 'SU 372 155'
        assert from_gridref(ref.text).as_xy() == (437200, 115500)

    @pytest.mark.parametrize('digits', [0, 6])
    def test_out_of_range_digits_raise(self, digits):
        ref = to_gridref({'ea': 437292, 'no': 115541})
        with pytest.raises(ValueError):
            reduce_precision(ref, digits)
