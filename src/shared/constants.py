from enum import Enum

# Spatial reference identifiers (EPSG codes)
# OSGB36 / British National Grid
BNG_CODE = 27700
# ETRS89 geographic 3D, used by the OS GIQTrans service
ETRS89_3D_CODE = 4937
# WGS84 geographic, used by the local PROJ pipelines
WGS84_CODE = 4326

# Size of a 100 km grid square (metres)
GRID_SQUARE_100KM = 100_000

# Size of a 500 km grid square (metres)
GRID_SQUARE_500KM = 500_000

# Number of digits per axis at full (1 m) precision
GRIDREF_MAX_DIGITS = 5

# Letters used for the 100 km / 500 km squares, row by row from the
# south-west corner (the letter I is not used)
GRID_LETTERS = 'VWXYZQRSTULMNOPFGHJKABCDE'

# Number of columns in the 5x5 letter square
GRID_LETTERS_COLS = 5

# Two-letter prefixes of the 100 km squares, indexed [row][col] from the
# false origin; 13 rows (northing) by 7 columns (easting)
GRID_PREFIXES: tuple[tuple[str, ...], ...] = (
    ('SV', 'SW', 'SX', 'SY', 'SZ', 'TV', 'TW'),
    ('SQ', 'SR', 'SS', 'ST', 'SU', 'TQ', 'TR'),
    ('SL', 'SM', 'SN', 'SO', 'SP', 'TL', 'TM'),
    ('SF', 'SG', 'SH', 'SJ', 'SK', 'TF', 'TG'),
    ('SA', 'SB', 'SC', 'SD', 'SE', 'TA', 'TB'),
    ('NV', 'NW', 'NX', 'NY', 'NZ', 'OV', 'OW'),
    ('NQ', 'NR', 'NS', 'NT', 'NU', 'OQ', 'OR'),
    ('NL', 'NM', 'NN', 'NO', 'NP', 'OL', 'OM'),
    ('NF', 'NG', 'NH', 'NJ', 'NK', 'OF', 'OG'),
    ('NA', 'NB', 'NC', 'ND', 'NE', 'OA', 'OB'),
    ('HV', 'HW', 'HX', 'HY', 'HZ', 'JV', 'JW'),
    ('HQ', 'HR', 'HS', 'HT', 'HU', 'JQ', 'JR'),
    ('HL', 'HM', 'HN', 'HO', 'HP', 'JL', 'JM'),
)

# Accepted grid reference text: major letter, minor letter, two digit groups
GRIDREF_PATTERN = (
    r'^[THJONS][VWXYZQRSTULMNOPFGHJKABCDE] ?[0-9]{1,5} ?[0-9]{1,5}$'
)

# Separator used by the decorative (HTML) rendering of a grid reference
GRIDREF_HTML_SEPARATOR = '&thinsp;'

# Extent of Great Britain, corners in X,Y order
# Projected: [[min_easting, min_northing], [max_easting, max_northing]]
PROJECTED_BOUNDS = ((0.0, 0.0), (699999.9, 1299999.9))
# Geographic: [[min_lng, min_lat], [max_lng, max_lat]]
GEOGRAPHIC_BOUNDS = ((-8.74, 49.84), (1.96, 60.9))

# Messages reported by the soft-fail checks
MSG_OUT_OF_RANGE = 'Coordinates out of range.'
MSG_INVALID_GRIDREF = 'Invalid grid reference.'
MSG_UNSUPPORTED_COORDINATES = 'Unsupported coordinate type.'

# Default number of decimal places in transformed output
LATLNG_DECIMALS_DEFAULT = 7
EASTNORTH_DECIMALS_DEFAULT = 2

# OSGB36 Transverse Mercator with the published seven-parameter shift
# (dx, dy, dz in m; rx, ry, rz in arc-seconds; ds in ppm)
HELMERT_OSGB36_TO_WGS84 = (
    446.448,
    -125.157,
    542.06,
    0.15,
    0.247,
    0.842,
    -20.489,
)

# Base definition of the National Grid projection on the Airy 1830 ellipsoid
BNG_TMERC_PROJ4 = (
    '+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 '
    '+x_0=400000 +y_0=-100000 +ellps=airy'
)

# Default locations of the OSTN15 datasets
OSTN15_GSB_PATH_DEFAULT = 'resources/OSTN15_NTv2_OSGBtoETRS.gsb'
OSTN15_TIF_PATH_DEFAULT = 'resources/uk_os_OSTN15_NTv2_OSGBtoETRS.tif'

# First bytes of a valid NTv2 file (overview header record name)
NTV2_SIGNATURE = b'NUM_OREC'
# First bytes of a TIFF / BigTIFF file (little and big endian)
TIFF_SIGNATURES = (b'II*\x00', b'MM\x00*', b'II+\x00', b'MM\x00+')

# Endpoint of the GIQTrans transformation service
GIQTRANS_CGI_PATH_DEFAULT = '/cgi-bin/giqtrans'

# HTTP
HTTP_OK = 200
HTTP_TIMEOUT_DEFAULT = 10.0

# Environment variable naming the settings file used by the CLI
CONFIG_ENV_VAR = 'OS_TRANSFORM_CONFIG'


class TransformType(str, Enum):
    """Available projected <-> geographic transformation strategies."""

    OSTN15_CGI = 'ostn15-cgi'  # GIQTrans request over HTTP
    OSTN15_GSB = 'ostn15-gsb'  # NTv2 grid shift file
    OSTN15_TIF = 'ostn15-tif'  # GeoTIFF grid shift file
    SIMPLE_TOWGS84 = 'simple-towgs84'  # Seven-parameter Helmert


class CoordinateSystem(str, Enum):
    """The two coordinate systems a strategy converts between."""

    NATIONAL_GRID = 'national_grid'
    GEOGRAPHIC = 'geographic'


def default_transform_type() -> TransformType:
    return TransformType.OSTN15_CGI
