"""Built-in quantity-kind catalog."""

from qframe.units.catalog import (
    BUILTIN_KINDS,
    AngleUnit,
    DurationUnit,
    ElectricPotentialUnit,
    FrequencyUnit,
    InformationUnit,
    LengthUnit,
    MassFlowUnit,
    MassUnit,
    PowerUnit,
    PressureUnit,
    RatioUnit,
    RotationalSpeedUnit,
    ScalarUnit,
    SpeedUnit,
    TemperatureUnit,
    TorqueUnit,
    VolumeUnit,
)

__all__ = [
    "BUILTIN_KINDS",
    "AngleUnit",
    "DurationUnit",
    "ElectricPotentialUnit",
    "FrequencyUnit",
    "InformationUnit",
    "LengthUnit",
    "MassFlowUnit",
    "MassUnit",
    "PowerUnit",
    "PressureUnit",
    "RatioUnit",
    "RotationalSpeedUnit",
    "ScalarUnit",
    "SpeedUnit",
    "TemperatureUnit",
    "TorqueUnit",
    "VolumeUnit",
]
