"""Numeric field registry mapping wire names to reading attributes."""

from dataclasses import dataclass

from soilsense.errors import InvalidRange


@dataclass(frozen=True)
class FieldConfig:
    """How a numeric telemetry field is stored and labelled."""

    attribute: str  # SensorReading attribute name
    wire_name: str  # camelCase name used by the dashboard
    unit: str
    label: str


_FIELDS = (
    FieldConfig(attribute="soil_moisture", wire_name="soilMoisture", unit="%", label="Soil moisture"),
    FieldConfig(attribute="humidity", wire_name="humidity", unit="%", label="Humidity"),
    FieldConfig(attribute="temperature", wire_name="temperature", unit="°C", label="Temperature"),
)

# Accept both the wire name and the attribute name
FIELD_REGISTRY: dict[str, FieldConfig] = {
    **{config.wire_name: config for config in _FIELDS},
    **{config.attribute: config for config in _FIELDS},
}


def resolve_field(name: str) -> FieldConfig:
    """Look up a field by wire or attribute name."""
    config = FIELD_REGISTRY.get(name)
    if config is None:
        supported = ", ".join(config.wire_name for config in _FIELDS)
        raise InvalidRange(f"Unknown field {name!r}; expected one of: {supported}")
    return config
