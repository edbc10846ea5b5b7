"""Generation tuning constants.

The numbers here are tuning values carried over as-is. They are grouped in
one frozen record so tests and callers can override them per call.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kickcombo.generation.schema.combo_spec import Category, Level, Mode

# Relative category weights per (mode, level). Zero means "never chosen".
DEFAULT_CATEGORY_WEIGHTS: dict[Mode, dict[Level, dict[Category, float]]] = {
    Mode.KICKBOXING: {
        Level.BEGINNER: {Category.PUNCH: 6.0, Category.KICK: 3.0, Category.KNEE: 0.0, Category.DEFENSE: 0.0},
        Level.INTERMEDIATE: {Category.PUNCH: 5.0, Category.KICK: 3.0, Category.KNEE: 1.0, Category.DEFENSE: 1.5},
        Level.ADVANCED: {Category.PUNCH: 4.0, Category.KICK: 3.0, Category.KNEE: 1.5, Category.DEFENSE: 2.0},
    },
    Mode.BOXING: {
        Level.BEGINNER: {Category.PUNCH: 1.0, Category.DEFENSE: 0.0},
        Level.INTERMEDIATE: {Category.PUNCH: 3.0, Category.DEFENSE: 1.0},
        Level.ADVANCED: {Category.PUNCH: 2.5, Category.DEFENSE: 1.0},
    },
}

DEFAULT_FIRST_KICK_CHANCE: dict[Level, float] = {
    Level.BEGINNER: 0.2,
    Level.INTERMEDIATE: 0.3,
    Level.ADVANCED: 0.35,
}


class GenerationTuning(BaseModel):
    """Overridable weighting constants for sequencing and selection.

    Attributes:
        used_move_penalty: Weight multiplier for a move already used in this combo
        rear_leg_penalty: Weight multiplier for rear-leg targeted kicks
        same_side_penalty: Weight multiplier when the side matches the previous move
        inside_boost: Weight multiplier for inside-line techniques
        lead_side_chance: Probability of narrowing the opener to lead-side moves
        second_to_last_factor: Share of the finisher bias applied to the second-to-last slot
        first_kick_chance: Probability of a kick-led opener, per level
        category_weights: Category weight table per mode and level
    """

    model_config = ConfigDict(frozen=True)

    used_move_penalty: float = Field(0.25, gt=0)
    rear_leg_penalty: float = Field(0.75, gt=0)
    same_side_penalty: float = Field(0.75, gt=0)
    inside_boost: float = Field(1.4, gt=0)
    lead_side_chance: float = Field(0.7, ge=0, le=1)
    second_to_last_factor: float = Field(0.5, ge=0, le=1)

    first_kick_chance: Mapping[Level, float] = Field(
        default_factory=lambda: DEFAULT_FIRST_KICK_CHANCE,
        validate_default=True,
    )
    category_weights: Mapping[Mode, Mapping[Level, Mapping[Category, float]]] = Field(
        default_factory=lambda: DEFAULT_CATEGORY_WEIGHTS,
        validate_default=True,
    )

    @field_validator("first_kick_chance")
    @classmethod
    def freeze_first_kick_chance(cls, value: Mapping[Level, float]) -> Mapping[Level, float]:
        """Store the chances read-only so a shared tuning cannot be mutated."""
        for level, chance in value.items():
            if not 0 <= chance <= 1:
                raise ValueError(f"first_kick_chance[{level}] must be within [0, 1], got {chance}")
        return MappingProxyType(dict(value))

    @field_validator("category_weights")
    @classmethod
    def freeze_category_weights(
        cls, value: Mapping[Mode, Mapping[Level, Mapping[Category, float]]]
    ) -> Mapping[Mode, Mapping[Level, Mapping[Category, float]]]:
        """Store the weight tables read-only, all three levels deep."""
        for table in value.values():
            for weights in table.values():
                if any(w < 0 for w in weights.values()):
                    raise ValueError("category weights must not be negative")
        return MappingProxyType(
            {
                mode: MappingProxyType({level: MappingProxyType(dict(weights)) for level, weights in table.items()})
                for mode, table in value.items()
            }
        )

    def weights_for(self, mode: Mode, level: Level) -> dict[Category, float]:
        """Return a fresh copy of the category weight table for mode/level."""
        return dict(self.category_weights[mode][level])


DEFAULT_TUNING = GenerationTuning()
