"""Command line entry point for os-transform."""

import argparse
import logging
import sys

from domain.errors import ConfigurationError, TransformError
from domain.models import TransformSettings
from services.coordinate_service import CoordinateService
from services.settings_service import load_settings, settings_from_env
from shared.constants import (
    EASTNORTH_DECIMALS_DEFAULT,
    LATLNG_DECIMALS_DEFAULT,
    TransformType,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_ERROR = 2


def setup_logging(level: str = 'WARNING') -> None:
    """Configure application logging; stdout is kept for results."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='os-transform',
        description=(
            'Convert between British National Grid easting/northing, '
            'latitude/longitude and grid references'
        ),
    )
    parser.add_argument('--config', help='Settings TOML file')
    parser.add_argument(
        '--type',
        choices=[t.value for t in TransformType],
        help='Transformation strategy (overrides the settings file)',
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('to-latlng', help='Easting/northing to latitude/longitude')
    p.add_argument('easting', type=float)
    p.add_argument('northing', type=float)
    p.add_argument('--decimals', type=int, default=LATLNG_DECIMALS_DEFAULT)

    p = sub.add_parser('from-latlng', help='Latitude/longitude to easting/northing')
    p.add_argument('lat', type=float)
    p.add_argument('lng', type=float)
    p.add_argument('--decimals', type=int, default=EASTNORTH_DECIMALS_DEFAULT)

    p = sub.add_parser('to-gridref', help='Easting/northing to grid reference')
    p.add_argument('easting', type=float)
    p.add_argument('northing', type=float)

    p = sub.add_parser('from-gridref', help='Grid reference to easting/northing')
    p.add_argument('gridref', nargs='+', help="e.g. SU 37292 15541 or 'SU3715'")

    return parser


def _resolve_settings(args: argparse.Namespace) -> TransformSettings:
    settings = load_settings(args.config) if args.config else settings_from_env()
    if args.type:
        settings = settings.model_copy(update={'type': TransformType(args.type)})
    return settings


def run(args: argparse.Namespace) -> int:
    """Execute the parsed command and print the result."""
    service = CoordinateService(_resolve_settings(args))

    if args.command == 'to-latlng':
        result = service.to_latlng(
            {'ea': args.easting, 'no': args.northing}, decimals=args.decimals
        )
        line = None if result is None else f'{result.latitude} {result.longitude}'
    elif args.command == 'from-latlng':
        result = service.from_latlng(
            {'lat': args.lat, 'lng': args.lng}, decimals=args.decimals
        )
        line = None if result is None else f'{result.easting} {result.northing}'
    elif args.command == 'to-gridref':
        result = service.to_gridref({'ea': args.easting, 'no': args.northing})
        line = None if result is None else result.text
    else:
        result = service.from_gridref(' '.join(args.gridref))
        line = None if result is None else f'{result.easting:.0f} {result.northing:.0f}'

    if line is None:
        return EXIT_EMPTY
    print(line)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        return run(args)
    except ConfigurationError as e:
        print(f'Configuration error: {e}', file=sys.stderr)
        return EXIT_ERROR
    except TransformError as e:
        logger.debug('Transformation failed', exc_info=True)
        print(f'Error: {e}', file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
