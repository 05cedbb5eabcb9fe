"""Tests for declarative tool contracts and argument validation."""

import pytest

from travel_core.accommodation import SEARCH_LISTINGS_TOOL
from travel_core.errors import InvalidArgumentsError
from travel_core.schema import ToolDescriptor, validate_arguments
from travel_core.weather import FORECAST_TOOL, ForecastArgs


def test_defaults_fill_omitted_optionals() -> None:
    clean = validate_arguments(FORECAST_TOOL, {"location": "London"})
    assert clean == ForecastArgs(location="London", days=3, units="metric")


def test_optional_without_default_is_none() -> None:
    clean = validate_arguments(SEARCH_LISTINGS_TOOL, {"location": "Paris"})
    assert clean.price_min is None
    assert clean.checkin is None
    assert clean.guests == 2
    assert clean.property_type == "any"
    assert clean.instant_book is False


def test_wire_names_map_to_fields() -> None:
    clean = validate_arguments(SEARCH_LISTINGS_TOOL, {
        "location": "Paris",
        "priceMin": 40,
        "priceMax": 120.5,
        "propertyType": "unique",
        "instantBook": True,
    })
    assert clean.price_min == 40
    assert clean.price_max == 120.5
    assert clean.property_type == "unique"
    assert clean.instant_book is True


def test_explicit_null_behaves_like_omitted() -> None:
    clean = validate_arguments(FORECAST_TOOL, {"location": "Oslo", "days": None})
    assert clean.days == 3


def test_unknown_keys_are_dropped() -> None:
    clean = validate_arguments(FORECAST_TOOL, {"location": "Oslo", "extra": 1})
    assert not hasattr(clean, "extra")


def test_every_violation_is_reported() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(FORECAST_TOOL, {"days": 9, "units": "rankine"})

    violations = excinfo.value.violations
    assert "location: Field required" in violations
    assert "days: Input should be less than or equal to 5" in violations
    assert any(v.startswith("units: Input should be 'metric'") for v in violations)
    assert len(violations) == 3
    assert str(excinfo.value).startswith("Invalid arguments for get_weather_forecast:")


def test_below_minimum() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(FORECAST_TOOL, {"location": "Oslo", "days": 0})
    assert excinfo.value.violations == ["days: Input should be greater than or equal to 1"]


def test_type_errors() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(
            SEARCH_LISTINGS_TOOL,
            {"location": 42, "guests": "two", "instantBook": "yes"},
        )
    assert set(excinfo.value.violations) == {
        "location: Input should be a valid string",
        "guests: Input should be a valid integer",
        "instantBook: Input should be a valid boolean",
    }


@pytest.mark.parametrize("arguments", [
    {"location": "Paris", "guests": True},
    {"location": "Paris", "priceMin": False},
])
def test_booleans_are_not_numbers(arguments: dict) -> None:
    with pytest.raises(InvalidArgumentsError):
        validate_arguments(SEARCH_LISTINGS_TOOL, arguments)


def test_numeric_strings_are_not_coerced() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(FORECAST_TOOL, {"location": "Oslo", "days": "4"})
    assert excinfo.value.violations == ["days: Input should be a valid integer"]


def test_fractional_float_rejected_for_integer() -> None:
    with pytest.raises(InvalidArgumentsError):
        validate_arguments(FORECAST_TOOL, {"location": "Oslo", "days": 2.5})


def test_negative_price_rejected() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(SEARCH_LISTINGS_TOOL, {"location": "Rome", "priceMax": -1})
    assert excinfo.value.violations == ["priceMax: Input should be greater than or equal to 0"]


def test_date_pattern() -> None:
    clean = validate_arguments(SEARCH_LISTINGS_TOOL, {"location": "Rome", "checkin": "2025-06-01"})
    assert clean.checkin == "2025-06-01"
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(SEARCH_LISTINGS_TOOL, {"location": "Rome", "checkin": "June 1st"})
    assert excinfo.value.violations[0].startswith("checkin: String should match pattern")


def test_non_object_arguments() -> None:
    with pytest.raises(InvalidArgumentsError) as excinfo:
        validate_arguments(FORECAST_TOOL, ["London"])
    assert excinfo.value.violations == ["arguments must be an object"]


def test_input_schema_shape() -> None:
    schema = FORECAST_TOOL.input_schema()
    assert schema["type"] == "object"
    assert schema["required"] == ["location"]
    assert schema["properties"]["days"] == {
        "type": "integer",
        "description": "Number of days for forecast (1-5)",
        "minimum": 1,
        "maximum": 5,
        "default": 3,
    }
    assert schema["properties"]["units"]["enum"] == ["metric", "imperial", "kelvin"]
    assert schema["properties"]["units"]["default"] == "metric"


def test_input_schema_uses_wire_names() -> None:
    properties = SEARCH_LISTINGS_TOOL.input_schema()["properties"]
    assert list(properties) == [
        "location", "checkin", "checkout", "guests",
        "priceMin", "priceMax", "propertyType", "instantBook",
    ]
    assert properties["propertyType"]["enum"] == ["any", "apartment", "house", "unique", "hotel"]
    assert properties["guests"]["minimum"] == 1
    assert properties["guests"]["maximum"] == 16


def test_descriptor_describe() -> None:
    descriptor = ToolDescriptor("ping", "Health check")
    assert descriptor.describe() == {
        "name": "ping",
        "description": "Health check",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    }
