#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m yandex_geocoder.geocoding.cli --query "Moscow, Tverskaya 7"
    python -m yandex_geocoder.geocoding.cli --point 37.611 55.758 --kind metro
    python -m yandex_geocoder.geocoding.cli --query "Tverskaya" --area 0.5 0.5 --center 37.6 55.75 --restrict
"""

import argparse
import logging
import sys
from typing import Optional, List

from yandex_geocoder.core import settings, ApiConfig
from yandex_geocoder.geocoding.base import GeocodingError
from yandex_geocoder.geocoding.client import YandexGeocoder
from yandex_geocoder.geocoding.filters import (
    KIND_HOUSE,
    KIND_STREET,
    KIND_METRO,
    KIND_DISTRICT,
    KIND_LOCALITY,
)
from yandex_geocoder.geocoding.response import GeocoderResponse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Yandex HTTP Geocoder command-line client"
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--query", "-q",
        type=str,
        help="Address or place to geocode"
    )
    target.add_argument(
        "--point",
        type=float,
        nargs=2,
        metavar=("LON", "LAT"),
        help="Reverse geocode a point"
    )

    parser.add_argument(
        "--kind", "-k",
        type=str,
        choices=[KIND_HOUSE, KIND_STREET, KIND_METRO, KIND_DISTRICT, KIND_LOCALITY],
        help="Toponym kind (reverse geocoding)"
    )
    parser.add_argument(
        "--lang",
        type=str,
        help="Response language, e.g. en-US"
    )
    parser.add_argument(
        "--limit", "-l",
        type=int,
        default=settings.DEFAULT_LIMIT,
        help="Maximum number of results"
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Number of results to skip"
    )
    parser.add_argument(
        "--area",
        type=float,
        nargs=2,
        metavar=("LNG_SPAN", "LAT_SPAN"),
        help="Search area size in degrees"
    )
    parser.add_argument(
        "--center",
        type=float,
        nargs=2,
        metavar=("LON", "LAT"),
        help="Search area center (with --area)"
    )
    parser.add_argument(
        "--restrict",
        action="store_true",
        help="Only return results inside the search area"
    )
    parser.add_argument(
        "--api-key",
        type=str,
        help="API key (default: YANDEX_GEOCODER_API_KEY)"
    )
    parser.add_argument(
        "--api-version",
        type=str,
        help="API version (default: YANDEX_GEOCODER_VERSION or 1.x)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    return parser


def apply_filters(geocoder: YandexGeocoder, args: argparse.Namespace) -> YandexGeocoder:
    """Copy parsed command-line options onto the geocoder filters."""
    if args.query is not None:
        geocoder.set_query(args.query)
    else:
        geocoder.set_point(*args.point)

    geocoder.set_limit(args.limit).set_offset(args.offset)

    if args.kind:
        geocoder.set_kind(args.kind)
    if args.lang:
        geocoder.set_lang(args.lang)
    if args.area:
        center = args.center or (None, None)
        geocoder.set_area(args.area[0], args.area[1], *center)
    if args.restrict:
        geocoder.use_area_limit(True)

    return geocoder


def print_response(response: GeocoderResponse, verbose: bool = False) -> None:
    """Print a human-readable summary of a response."""
    print(f"\nQuery: {response.get_query()}")
    print(f"Found: {response.get_found_count()}")
    print("-" * 50)

    if not len(response):
        print("✗ No match found")
        return

    for i, obj in enumerate(response, 1):
        print(f"{i}. {obj.address or obj.name}")
        print(f"   Kind:      {obj.kind} ({obj.precision})")
        if obj.latitude is not None and obj.longitude is not None:
            print(f"   Latitude:  {obj.latitude:.6f}")
            print(f"   Longitude: {obj.longitude:.6f}")
        if verbose and obj.raw:
            print(f"   Raw: {obj.raw}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = ApiConfig.from_settings(settings, api_key=args.api_key, version=args.api_version)
    if not config.api_key:
        print("Error: YANDEX_GEOCODER_API_KEY not configured (or pass --api-key)")
        return 2

    geocoder = YandexGeocoder.from_config(config)
    apply_filters(geocoder, args)

    transport_options = {}
    if args.timeout is not None:
        transport_options["timeout"] = args.timeout

    try:
        geocoder.load(**transport_options)
    except GeocodingError as e:
        logger.error(f"Geocoding failed: {e}")
        print(f"Error: {e}")
        return 1

    print_response(geocoder.get_response(), verbose=args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
