"""Data models for energy and macronutrient targets."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor equation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Daily activity tiers used to scale BMR into TDEE."""
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class WeightGoal(str, Enum):
    """Direction of the desired body weight change."""
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class MacroPreference(str, Enum):
    """Preferred split between fat and carbohydrate calories."""
    BALANCED = "balanced"
    LOW_CARB = "low_carb"
    LOW_FAT = "low_fat"


class WeightUnit(str, Enum):
    """Units accepted for body weight input."""
    KG = "kg"
    LBS = "lbs"


@dataclass
class BiometricProfile:
    """
    Inputs for a macro calculation.

    Ranges (age 15-100, height 100-250 cm, weight 30-300 kg) are checked by
    the caller; the calculator only rejects values it cannot compute with.
    """
    age: int
    sex: Sex
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    weight_change_rate: float = 0.0  # kg per week
    macro_preference: MacroPreference = MacroPreference.BALANCED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "age": self.age,
            "sex": _enum_value(self.sex),
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "activity_level": _enum_value(self.activity_level),
            "weight_goal": _enum_value(self.weight_goal),
            "weight_change_rate": self.weight_change_rate,
            "macro_preference": _enum_value(self.macro_preference),
        }


@dataclass(frozen=True)
class MacroTargets:
    """Daily energy and macronutrient targets."""
    bmr: int
    tdee: int
    target_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    warnings: Tuple[str, ...] = ()

    @property
    def protein_kcal(self) -> int:
        return self.protein_g * 4

    @property
    def carbs_kcal(self) -> int:
        return self.carbs_g * 4

    @property
    def fat_kcal(self) -> int:
        return self.fat_g * 9

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "bmr": self.bmr,
            "tdee": self.tdee,
            "target_calories": self.target_calories,
            "protein_g": self.protein_g,
            "carbs_g": self.carbs_g,
            "fat_g": self.fat_g,
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class MacroCalculation:
    """Targets together with the time they were calculated."""
    profile: BiometricProfile
    targets: MacroTargets
    calculated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "targets": self.targets.to_dict(),
            "calculated_at": self.calculated_at.isoformat(),
        }


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


# ============================================================================
# Pydantic schemas for API
# ============================================================================

class MacroRequestSchema(BaseModel):
    """Macro calculation request, accepting metric or imperial units."""
    age: int = Field(..., ge=15, le=100)
    sex: Sex
    height_cm: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    height_feet: Optional[int] = Field(default=None, ge=0)
    height_inches: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    weight_unit: WeightUnit = WeightUnit.KG
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    weight_change_rate: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    macro_preference: MacroPreference = MacroPreference.BALANCED

    @model_validator(mode="after")
    def check_height(self) -> "MacroRequestSchema":
        if self.height_cm is None and self.height_feet is None:
            raise ValueError("Provide height_cm or height_feet/height_inches")
        return self


class MacroTargetsSchema(BaseModel):
    """Calculated targets."""
    bmr: int
    tdee: int
    target_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    warnings: List[str] = []


class MacroResponseSchema(BaseModel):
    """Macro calculation response."""
    height_cm: float
    weight_kg: float
    targets: MacroTargetsSchema
    calculated_at: datetime


class ActivityLevelSchema(BaseModel):
    """Activity tier metadata."""
    value: ActivityLevel
    multiplier: float
    label: str
    description: str


class WeightChangeRateSchema(BaseModel):
    """A selectable weekly weight change rate."""
    value: float
    label: str
