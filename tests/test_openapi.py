"""Content of the generated API description and the documentation UI."""
import logging

import pytest
from fastapi.testclient import TestClient

from openapi_examples.config import Settings
from openapi_examples.docs import RouteComments, build_openapi_document
from openapi_examples.main import create_app

DOCUMENT_URL = "/swagger/v1/swagger.json"


@pytest.fixture()
def document(client) -> dict:
    response = client.get(DOCUMENT_URL)
    assert response.status_code == 200
    return response.json()


def test_document_describes_exactly_the_forecast_route(document) -> None:
    assert list(document["paths"]) == ["/WeatherForecast/{id}"]
    path_item = document["paths"]["/WeatherForecast/{id}"]
    assert list(path_item) == ["get"]

    parameters = path_item["get"]["parameters"]
    assert len(parameters) == 1
    assert parameters[0]["name"] == "id"
    assert parameters[0]["in"] == "path"
    assert parameters[0]["required"] is True
    assert parameters[0]["schema"]["format"] == "uuid"


def test_document_info_metadata(document) -> None:
    info = document["info"]
    assert info["title"] == "My API"
    assert info["version"] == "1"
    assert info["description"] == "A simple example FastAPI web API"
    assert info["termsOfService"] == "https://example.com/tos"
    assert info["contact"]["name"] == "Your Name"
    assert info["contact"]["email"] == "you@example.com"
    assert info["contact"]["url"].startswith("https://example.com")
    assert info["license"]["name"] == "Use under LICX"
    assert info["license"]["url"] == "https://example.com/license"


def test_route_comments_are_applied(document) -> None:
    operation = document["paths"]["/WeatherForecast/{id}"]["get"]
    assert operation["operationId"] == "get_weather_forecast"
    assert operation["summary"] == "Get a weather forecast by id"
    assert "**Sample request**" in operation["description"]
    assert "GET /WeatherForecast/12345678-1234-1234-1234-123456789012" in operation["description"]
    assert operation["parameters"][0]["description"] == "The id of the weather forecast you want to get"
    assert operation["responses"]["200"]["description"] == "The weather forecast with the specified id"


def test_validation_response_is_documented_as_problem(document) -> None:
    responses = document["paths"]["/WeatherForecast/{id}"]["get"]["responses"]
    assert "422" not in responses
    content = responses["400"]["content"]
    assert list(content) == ["application/problem+json"]
    assert content["application/problem+json"]["schema"]["$ref"] == "#/components/schemas/ValidationProblem"

    schemas = document["components"]["schemas"]
    assert "ValidationProblem" in schemas
    assert "HTTPValidationError" not in schemas
    assert "ValidationError" not in schemas


def test_document_is_built_once() -> None:
    app = create_app(Settings(_env_file=None))
    first = app.openapi()
    assert app.openapi() is first


def test_served_document_is_the_built_document() -> None:
    app = create_app(Settings(_env_file=None))
    client = TestClient(app)

    served = client.get(DOCUMENT_URL).json()
    assert served == app.openapi_schema
    # Later requests keep serving the same document.
    assert client.get(DOCUMENT_URL).json() == served
    assert served["info"]["termsOfService"] == "https://example.com/tos"
    assert "422" not in served["paths"]["/WeatherForecast/{id}"]["get"]["responses"]


def test_document_can_be_limited_to_development(make_client) -> None:
    client = make_client(environment="production", document_in_development_only=True)
    assert client.get(DOCUMENT_URL).status_code == 404
    assert client.get("/WeatherForecast/12345678-1234-1234-1234-123456789012").status_code == 200

    client = make_client(environment="development", document_in_development_only=True)
    assert client.get(DOCUMENT_URL).status_code == 200
    assert client.get("/").status_code == 200


def test_document_stays_available_for_export_when_not_served() -> None:
    app = create_app(Settings(_env_file=None, document_in_development_only=True))
    assert app.openapi()["info"]["termsOfService"] == "https://example.com/tos"


def test_document_url_follows_document_name(make_client) -> None:
    client = make_client(document_name="v2")
    assert client.get("/swagger/v2/swagger.json").status_code == 200
    assert client.get(DOCUMENT_URL).status_code == 404


def test_unknown_operation_comment_is_ignored(caplog) -> None:
    settings = Settings(_env_file=None)
    app = create_app(settings)
    comments = RouteComments.model_validate(
        {"operations": {"delete_everything": {"summary": "Not a route"}}}
    )
    with caplog.at_level(logging.WARNING, logger="openapi_examples.docs.openapi"):
        document = build_openapi_document(app, settings, comments)

    assert "delete_everything" in caplog.text
    operation = document["paths"]["/WeatherForecast/{id}"]["get"]
    assert "description" not in operation


@pytest.mark.parametrize("environment", ["development", "Development"])
def test_documentation_ui_in_development(make_client, environment) -> None:
    client = make_client(environment=environment)
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "swagger-ui" in response.text
    assert DOCUMENT_URL in response.text
    assert "My API V1" in response.text


@pytest.mark.parametrize("environment", ["production", "staging", "test"])
def test_documentation_ui_absent_outside_development(make_client, environment) -> None:
    client = make_client(environment=environment)
    assert client.get("/").status_code == 404
    assert client.get(DOCUMENT_URL).status_code == 200


def test_documentation_ui_is_not_documented(make_client) -> None:
    client = make_client(environment="development")
    assert list(client.get(DOCUMENT_URL).json()["paths"]) == ["/WeatherForecast/{id}"]
