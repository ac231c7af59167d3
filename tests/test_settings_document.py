import pytest
from pydantic import ValidationError

from idleview.settings.document import PhotosSettings, SettingsDocument, UnitsSettings


def test_defaults() -> None:
    doc = SettingsDocument.default()
    assert doc.units.temperature_unit == "celsius"
    assert doc.units.time_format == "24h"
    assert doc.units.date_format == "dmy"
    assert doc.units.wind_speed_unit == "kmh"
    assert doc.display.show_cpu_temp is False
    assert doc.display.theme == "default"
    assert doc.photos.refresh_interval == 30
    assert doc.photos.photo_quality == "80"


def test_empty_document_uses_defaults() -> None:
    assert SettingsDocument.model_validate({}) == SettingsDocument.default()


def test_partial_document_fills_missing_fields() -> None:
    doc = SettingsDocument.model_validate(
        {
            "units": {"temperature_unit": "fahrenheit"},
            # older files have no theme
            "display": {"show_humidity_wind": False},
        }
    )
    assert doc.units.temperature_unit == "fahrenheit"
    assert doc.units.time_format == "24h"
    assert doc.display.show_humidity_wind is False
    assert doc.display.theme == "default"
    assert doc.photos.refresh_interval == 30


def test_unknown_keys_are_ignored() -> None:
    doc = SettingsDocument.model_validate({"extra": 1, "units": {"foo": "bar"}})
    assert "extra" not in doc.to_json_tree()
    assert "foo" not in doc.to_json_tree()["units"]


def test_unknown_unit_labels_are_stored() -> None:
    doc = SettingsDocument.model_validate({"units": {"temperature_unit": "kelvin"}})
    assert doc.units.temperature_unit == "kelvin"
    assert doc.units.is_fahrenheit is False


def test_numeric_photo_quality_is_stored_as_string() -> None:
    doc = SettingsDocument.model_validate({"photos": {"photo_quality": 85}})
    assert doc.photos.photo_quality == "85"


@pytest.mark.parametrize("interval", [0, -5])
def test_refresh_interval_must_be_positive(interval: int) -> None:
    with pytest.raises(ValidationError):
        PhotosSettings(refresh_interval=interval)


@pytest.mark.parametrize(
    "quality, expected",
    [
        ("low", 65),
        ("medium", 80),
        ("high", 100),
        ("maximum", 100),
        ("0", 0),
        ("55", 55),
        ("100", 100),
        ("150", 80),
        ("sharp", 80),
    ],
)
def test_quality_percent(quality: str, expected: int) -> None:
    assert PhotosSettings(photo_quality=quality).quality_percent == expected


@pytest.mark.parametrize(
    "unit, label",
    [("kmh", "km/h"), ("mph", "mph"), ("ms", "m/s"), ("knots", "km/h")],
)
def test_wind_speed_label(unit: str, label: str) -> None:
    assert UnitsSettings(wind_speed_unit=unit).wind_speed_label == label
