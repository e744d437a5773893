"""
Built-in quantity kinds.

Each enumeration lists the units of one kind; member values are pint unit expressions, so
conversion factors come from pint's default definitions.
"""

from enum import Enum

from qframe.schema.descriptors import QuantityKindDescriptor
from qframe.schema.quantity import Quantity


class LengthUnit(Enum):
    METER = "meter"
    DECIMETER = "decimeter"
    CENTIMETER = "centimeter"
    MILLIMETER = "millimeter"
    KILOMETER = "kilometer"
    INCH = "inch"
    FOOT = "foot"
    YARD = "yard"
    MILE = "mile"


class MassUnit(Enum):
    KILOGRAM = "kilogram"
    GRAM = "gram"
    MILLIGRAM = "milligram"
    TONNE = "metric_ton"
    POUND = "pound"
    OUNCE = "ounce"


class VolumeUnit(Enum):
    CUBIC_METER = "meter ** 3"
    CUBIC_DECIMETER = "decimeter ** 3"
    CUBIC_CENTIMETER = "centimeter ** 3"
    CUBIC_INCH = "inch ** 3"
    CUBIC_FOOT = "foot ** 3"
    LITER = "liter"
    US_GALLON = "gallon"


class AngleUnit(Enum):
    DEGREE = "degree"
    RADIAN = "radian"
    REVOLUTION = "revolution"


class InformationUnit(Enum):
    BIT = "bit"
    BYTE = "byte"
    KILOBYTE = "kilobyte"
    MEGABYTE = "megabyte"
    GIGABYTE = "gigabyte"
    TERABYTE = "terabyte"
    KIBIBYTE = "kibibyte"
    MEBIBYTE = "mebibyte"
    GIBIBYTE = "gibibyte"
    GIBIBIT = "gibibit"


class SpeedUnit(Enum):
    METER_PER_SECOND = "meter / second"
    KILOMETER_PER_HOUR = "kilometer / hour"
    MILE_PER_HOUR = "mile / hour"
    KNOT = "knot"


class PowerUnit(Enum):
    WATT = "watt"
    KILOWATT = "kilowatt"
    MECHANICAL_HORSEPOWER = "horsepower"


class TorqueUnit(Enum):
    NEWTON_METER = "newton * meter"
    POUND_FORCE_FOOT = "force_pound * foot"


class RotationalSpeedUnit(Enum):
    REVOLUTION_PER_MINUTE = "revolution / minute"
    REVOLUTION_PER_SECOND = "revolution / second"
    RADIAN_PER_SECOND = "radian / second"


class FrequencyUnit(Enum):
    HERTZ = "hertz"
    KILOHERTZ = "kilohertz"
    MEGAHERTZ = "megahertz"


class TemperatureUnit(Enum):
    KELVIN = "kelvin"
    DEGREE_CELSIUS = "degree_Celsius"
    DEGREE_FAHRENHEIT = "degree_Fahrenheit"


class DurationUnit(Enum):
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"


class PressureUnit(Enum):
    PASCAL = "pascal"
    KILOPASCAL = "kilopascal"
    BAR = "bar"
    PSI = "psi"


class ScalarUnit(Enum):
    AMOUNT = "count"


class RatioUnit(Enum):
    DECIMAL_FRACTION = "dimensionless"
    PERCENT = "percent"


class ElectricPotentialUnit(Enum):
    VOLT = "volt"
    MILLIVOLT = "millivolt"


class MassFlowUnit(Enum):
    GRAM_PER_SECOND = "gram / second"
    KILOGRAM_PER_HOUR = "kilogram / hour"


def _builtin(name: str, unit_type: type[Enum]) -> QuantityKindDescriptor:
    return QuantityKindDescriptor(name=name, unit_type=unit_type, quantity_type=Quantity, builtin=True)


BUILTIN_KINDS: tuple[QuantityKindDescriptor, ...] = (
    _builtin("Length", LengthUnit),
    _builtin("Mass", MassUnit),
    _builtin("Volume", VolumeUnit),
    _builtin("Angle", AngleUnit),
    _builtin("Information", InformationUnit),
    _builtin("Speed", SpeedUnit),
    _builtin("Power", PowerUnit),
    _builtin("Torque", TorqueUnit),
    _builtin("RotationalSpeed", RotationalSpeedUnit),
    _builtin("Frequency", FrequencyUnit),
    _builtin("Temperature", TemperatureUnit),
    _builtin("Duration", DurationUnit),
    _builtin("Pressure", PressureUnit),
    _builtin("Scalar", ScalarUnit),
    _builtin("Ratio", RatioUnit),
    _builtin("ElectricPotential", ElectricPotentialUnit),
    _builtin("MassFlow", MassFlowUnit),
)
