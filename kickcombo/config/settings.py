from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kickcombo.core.logger import VALID_LOG_LEVELS, normalize_log_level
from kickcombo.generation.tuning import GenerationTuning


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="KICKCOMBO_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="KICKCOMBO_LOG_FILE")

    used_move_penalty: float = Field(
        default=0.25,
        gt=0,
        validation_alias="KICKCOMBO_USED_MOVE_PENALTY",
        description="Weight multiplier for a move already used earlier in the combo",
    )
    rear_leg_penalty: float = Field(
        default=0.75,
        gt=0,
        validation_alias="KICKCOMBO_REAR_LEG_PENALTY",
        description="Weight multiplier for rear-leg targeted kicks",
    )
    same_side_penalty: float = Field(
        default=0.75,
        gt=0,
        validation_alias="KICKCOMBO_SAME_SIDE_PENALTY",
        description="Weight multiplier for a move on the same side as the previous one",
    )
    inside_boost: float = Field(
        default=1.4,
        gt=0,
        validation_alias="KICKCOMBO_INSIDE_BOOST",
        description="Weight multiplier for inside-line techniques",
    )
    lead_side_chance: float = Field(
        default=0.7,
        ge=0,
        le=1,
        validation_alias="KICKCOMBO_LEAD_SIDE_CHANCE",
        description="Probability of narrowing the opener to lead-side techniques (0.0-1.0)",
    )
    second_to_last_factor: float = Field(
        default=0.5,
        ge=0,
        le=1,
        validation_alias="KICKCOMBO_SECOND_TO_LAST_FACTOR",
        description="Share of the finisher bias applied to the second-to-last slot (0.0-1.0)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the loguru level names."""
        normalized = normalize_log_level(value)
        if normalized is None:
            logger.warning(f"Invalid KICKCOMBO_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}. Defaulting to INFO.")
            return "INFO"
        return normalized

    def tuning(self) -> GenerationTuning:
        """Build the generation tuning from the configured overrides."""
        return GenerationTuning(
            used_move_penalty=self.used_move_penalty,
            rear_leg_penalty=self.rear_leg_penalty,
            same_side_penalty=self.same_side_penalty,
            inside_boost=self.inside_boost,
            lead_side_chance=self.lead_side_chance,
            second_to_last_factor=self.second_to_last_factor,
        )


settings = Settings()
