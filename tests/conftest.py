"""Shared fixtures for the geocoder tests."""

import json
from typing import Any, Dict, List, Optional

import pytest

from yandex_geocoder.geocoding.client import YandexGeocoder
from yandex_geocoder.geocoding.transport import BaseTransport, TransportResult


class StubTransport(BaseTransport):
    """Transport returning a canned result and recording every call."""

    def __init__(self, result: Optional[TransportResult] = None):
        self.result = result or TransportResult(url="", body="")
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, params, **options):
        self.calls.append({"url": url, "params": dict(params), "options": options})
        return self.result

    def respond_with(self, payload: Any = None, body: Optional[str] = None, status_code: int = 200):
        if body is None:
            body = json.dumps(payload)
        self.result = TransportResult(url="", body=body, status_code=status_code)
        return self

    def fail_with(self, message: str, exception: Optional[BaseException] = None):
        self.result = TransportResult(
            url="",
            error=True,
            error_message=message,
            exception=exception,
        )
        return self


def make_feature(
    name: str,
    pos: str,
    kind: str = "house",
    formatted: str = "",
    components: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    return {
        "GeoObject": {
            "metaDataProperty": {
                "GeocoderMetaData": {
                    "precision": "exact",
                    "text": formatted,
                    "kind": kind,
                    "Address": {
                        "country_code": "RU",
                        "formatted": formatted,
                        "Components": components or [],
                    },
                }
            },
            "name": name,
            "description": "Moscow, Russia",
            "boundedBy": {
                "Envelope": {
                    "lowerCorner": "37.602 55.755",
                    "upperCorner": "37.618 55.764",
                }
            },
            "Point": {"pos": pos},
        }
    }


@pytest.fixture
def geocode_payload() -> Dict[str, Any]:
    return {
        "response": {
            "GeoObjectCollection": {
                "metaDataProperty": {
                    "GeocoderResponseMetaData": {
                        "request": "Moscow, Tverskaya 7",
                        "found": "2",
                        "results": "5",
                    }
                },
                "featureMember": [
                    make_feature(
                        "Tverskaya ulitsa, 7",
                        "37.610225 55.757743",
                        formatted="Russia, Moscow, Tverskaya ulitsa, 7",
                        components=[
                            {"kind": "country", "name": "Russia"},
                            {"kind": "province", "name": "Moscow"},
                            {"kind": "locality", "name": "Moscow"},
                            {"kind": "street", "name": "Tverskaya ulitsa"},
                            {"kind": "house", "name": "7"},
                        ],
                    ),
                    make_feature(
                        "Tverskaya ulitsa",
                        "37.604 55.763",
                        kind="street",
                        formatted="Russia, Moscow, Tverskaya ulitsa",
                    ),
                ],
            }
        }
    }


@pytest.fixture
def reverse_payload() -> Dict[str, Any]:
    return {
        "response": {
            "GeoObjectCollection": {
                "metaDataProperty": {
                    "GeocoderResponseMetaData": {
                        "request": "37.611000,55.758000",
                        "found": "7",
                        "results": "1",
                        "Point": {"pos": "37.611000 55.758000"},
                        "kind": "metro",
                    }
                },
                "featureMember": [
                    make_feature(
                        "metro Teatralnaya",
                        "37.618 55.758",
                        kind="metro",
                        formatted="Russia, Moscow, Zamoskvoretskaya line, metro Teatralnaya",
                    ),
                ],
            }
        }
    }


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def geocoder(transport) -> YandexGeocoder:
    return YandexGeocoder("ABC", transport=transport)
