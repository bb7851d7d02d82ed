"""
Unit tests for the requests-based transport.
"""

from unittest.mock import Mock

import requests
import pytest

from yandex_geocoder.geocoding.transport import RequestsTransport

URL = "https://geocode-maps.yandex.ru/1.x/"


def make_session(status_code=200, text='{"response": {}}', side_effect=None):
    session = Mock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.url = URL + "?geocode=Moscow"
        session.get.return_value = response
    return session


class TestRequestsTransport:

    def test_get_follows_redirects_with_params(self):
        session = make_session()
        transport = RequestsTransport(session=session, timeout=7, user_agent="test-agent")

        result = transport.get(URL, {"geocode": "Moscow"})

        session.get.assert_called_once_with(
            URL,
            params={"geocode": "Moscow"},
            headers={"User-Agent": "test-agent"},
            timeout=7,
            allow_redirects=True,
        )
        assert not result.error
        assert result.body == '{"response": {}}'
        assert result.status_code == 200

    def test_options_override_defaults(self):
        session = make_session()
        transport = RequestsTransport(session=session, timeout=7, user_agent="test-agent")

        transport.get(URL, {}, timeout=1, headers={"Accept-Language": "ru"})

        kwargs = session.get.call_args.kwargs
        assert kwargs["timeout"] == 1
        assert kwargs["headers"] == {"User-Agent": "test-agent", "Accept-Language": "ru"}

    def test_http_error_status_is_not_a_transport_error(self):
        body = '{"error": "Forbidden", "message": "Invalid key", "statusCode": 403}'
        transport = RequestsTransport(session=make_session(status_code=403, text=body))

        result = transport.get(URL, {})

        assert not result.error
        assert result.status_code == 403
        assert result.body == body

    @pytest.mark.parametrize("exc", [
        requests.ConnectionError("refused"),
        requests.Timeout("timed out"),
        requests.TooManyRedirects("loop"),
    ])
    def test_request_exceptions_set_error_flag(self, exc):
        transport = RequestsTransport(session=make_session(side_effect=exc))

        result = transport.get(URL, {})

        assert result.error
        assert result.exception is exc
        assert result.body == ""
        assert result.url == URL

    def test_timeout_message(self):
        transport = RequestsTransport(session=make_session(side_effect=requests.Timeout("slow")))
        assert transport.get(URL, {}).error_message == "Timeout: slow"

    def test_debug_log_omits_query_string(self, caplog):
        session = make_session(status_code=403, text="{}")
        session.get.return_value.url = URL + "?apikey=SECRET&geocode=Moscow"
        transport = RequestsTransport(session=session)

        with caplog.at_level("DEBUG", logger="yandex_geocoder"):
            transport.get(URL, {"apikey": "SECRET", "geocode": "Moscow"})

        assert "HTTP 403" in caplog.text
        assert "SECRET" not in caplog.text

    def test_close(self):
        session = make_session()
        RequestsTransport(session=session).close()
        session.close.assert_called_once()
