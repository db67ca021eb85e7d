import httpx
import pytest

from weather_cli.errors import BodyTextError, DateTimeParseError, JsonParseError, RequestError, ServerError
from weather_cli.openweather import OpenWeatherClient

from conftest import json_responder

URL = "https://api.openweathermap.org/data/2.5/weather"


class BrokenStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""


@pytest.mark.asyncio
async def test_current_weather(mock_http, openweather_payload):
    client, transport = mock_http(json_responder(200, openweather_payload))
    api = OpenWeatherClient(URL + "/", "my_key", client=client)

    weather_data = await api.get_weather_data("AnotherCity")

    assert weather_data.temp == 22.0
    assert weather_data.humidity == 60
    assert weather_data.pressure == 1005
    assert weather_data.wind_speed == 12.0
    assert weather_data.visibility == 8000
    assert weather_data.description == "light rain"

    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url.host == "api.openweathermap.org"
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["q"] == "AnotherCity"
    assert request.url.params["appid"] == "my_key"
    assert request.url.params["units"] == "metric"
    assert "dt" not in request.url.params


@pytest.mark.asyncio
async def test_historical_weather_sends_timestamp(mock_http, openweather_payload):
    client, transport = mock_http(json_responder(200, openweather_payload))
    api = OpenWeatherClient(URL, "my_key", client=client)

    await api.get_weather_data("AnotherCity", "2023-10-15")

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.url.host == "api.openweathermap.org"
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["dt"] == "1697328000"


@pytest.mark.asyncio
async def test_invalid_date_sends_no_request(mock_http, openweather_payload):
    client, transport = mock_http(json_responder(200, openweather_payload))
    api = OpenWeatherClient(URL, "my_key", client=client)

    with pytest.raises(DateTimeParseError) as exc_info:
        await api.get_weather_data("AnotherCity", "InvalidDate")

    assert exc_info.value.input == "InvalidDate"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_server_error_message_is_verbatim(mock_http):
    client, _ = mock_http(json_responder(401, {"cod": 401, "message": "Invalid API key. Please see FAQ."}))
    api = OpenWeatherClient(URL, "bad_key", client=client)

    with pytest.raises(ServerError) as exc_info:
        await api.get_weather_data("SomeCity")

    assert exc_info.value.message == "Invalid API key. Please see FAQ."


@pytest.mark.asyncio
async def test_invalid_json_on_success(mock_http):
    client, _ = mock_http(lambda request: httpx.Response(200, text="invalid json"))
    api = OpenWeatherClient(URL, "123", client=client)

    with pytest.raises(JsonParseError):
        await api.get_weather_data("SomeCity")


@pytest.mark.asyncio
async def test_unexpected_shape_on_success(mock_http):
    client, _ = mock_http(json_responder(200, {"main": {"temp": 1.0}}))
    api = OpenWeatherClient(URL, "123", client=client)

    with pytest.raises(JsonParseError):
        await api.get_weather_data("SomeCity")


@pytest.mark.asyncio
async def test_invalid_json_on_error(mock_http):
    client, _ = mock_http(lambda request: httpx.Response(500, text="<html>Internal Server Error</html>"))
    api = OpenWeatherClient(URL, "123", client=client)

    with pytest.raises(JsonParseError):
        await api.get_weather_data("SomeCity")


@pytest.mark.asyncio
async def test_transport_failure(mock_http):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client, _ = mock_http(refuse)
    api = OpenWeatherClient("http://invalid-url", "123", client=client)

    with pytest.raises(RequestError) as exc_info:
        await api.get_weather_data("SomeCity")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_unreadable_body(mock_http):
    client, _ = mock_http(lambda request: httpx.Response(200, stream=BrokenStream()))
    api = OpenWeatherClient(URL, "123", client=client)

    with pytest.raises(BodyTextError):
        await api.get_weather_data("SomeCity")
