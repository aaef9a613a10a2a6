"""Unit conversions for body measurements.

Values are returned unrounded; rounding happens only on final targets.
"""

LBS_TO_KG = 0.453592
KG_TO_LBS = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * LBS_TO_KG


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * KG_TO_LBS


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def feet_inches_to_cm(feet: float, inches: float = 0.0) -> float:
    """
    Convert a height given as feet plus inches to centimeters.

    Args:
        feet: Whole or fractional feet
        inches: Additional inches

    Returns:
        Height in centimeters
    """
    total_inches = feet * INCHES_PER_FOOT + inches
    return inches_to_cm(total_inches)
