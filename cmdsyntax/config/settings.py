from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class HandlerSettings(BaseSettings):
    bot_prefix: str = Field(default="!", description="Command prefix")
    environment: str = Field(default="development", description="Environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Command resolution
    case_insensitive_commands: bool = Field(
        default=True, description="Match group and command tokens regardless of case"
    )
    usage_hints: bool = Field(default=True, description="Reply with a usage hint when arguments fail to parse")

    # Default bounds for string arguments
    string_min_length: int = Field(default=0, ge=0, description="Minimum length of a string argument")
    string_max_length: int = Field(default=2000, ge=1, description="Maximum length of a string argument")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @model_validator(mode="after")
    def check_string_bounds(self) -> "HandlerSettings":
        if self.string_min_length > self.string_max_length:
            raise ValueError(
                f"string_min_length ({self.string_min_length}) exceeds string_max_length ({self.string_max_length})"
            )
        return self

    @property
    def type_options(self) -> dict[str, dict[str, int]]:
        return {
            "string": {
                "min_length": self.string_min_length,
                "max_length": self.string_max_length,
            }
        }


# Global settings instance
settings = HandlerSettings()
