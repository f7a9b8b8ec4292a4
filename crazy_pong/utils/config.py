"""
Crazy Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for temporary overrides
    model_config = {"validate_assignment": True}

    # Reference layout, every pixel size is scaled from these
    REF_WIDTH: int = Field(default=800, gt=0, description="Reference arena width in pixels")
    REF_HEIGHT: int = Field(default=600, gt=0, description="Reference arena height in pixels")
    REF_PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Reference paddle width")
    REF_PADDLE_HEIGHT: float = Field(default=80.0, gt=0, description="Reference paddle height")
    REF_PADDLE_OFFSET: float = Field(
        default=10.0, ge=0, description="Reference distance between paddles and side walls"
    )
    REF_BALL_RADIUS: float = Field(default=10.0, gt=0, description="Reference ball radius")

    # Controls
    INITIAL_PADDLE_RATIO: float = Field(
        default=260 / 600, ge=0, le=1, description="Initial paddle top as a ratio of height"
    )
    KEY_MOVE_DISTANCE: float = Field(
        default=10.0, gt=0, description="Unscaled paddle step per arrow key press"
    )

    # Ball physics
    BALL_SPEED: float = Field(default=150.0, gt=0, description="Initial ball speed in px/s")
    WALL_SPEED_INCREMENT: float = Field(
        default=10.0, ge=0, description="Speed gained on each top/bottom wall bounce"
    )
    PADDLE_SPEED_INCREMENT: float = Field(
        default=25.0, ge=0, description="Speed gained on each paddle hit"
    )
    REBOUND_ANGLE_MIN: float = Field(default=1.0, description="Lowest rebound angle in degrees")
    REBOUND_ANGLE_MAX: float = Field(
        default=189.0, description="Upper (exclusive) rebound angle in degrees"
    )

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(17, 17, 17), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(0, 200, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("REBOUND_ANGLE_MAX")
    @classmethod
    def validate_rebound_range(cls, v: float, info: ValidationInfo) -> float:
        """Validate that the rebound range is a non-empty half-turn at most"""
        low = info.data.get("REBOUND_ANGLE_MIN", 1.0) if info.data else 1.0
        if v <= low:
            raise ValueError(f"REBOUND_ANGLE_MAX ({v}) must be greater than REBOUND_ANGLE_MIN ({low})")
        if v - low > 360:
            raise ValueError(f"Rebound range ({v - low} degrees) must not exceed a full turn")
        return v

    @model_validator(mode="after")
    def validate_reference_layout(self) -> "GameConfig":
        """Validate the reference arena is large enough for the game elements"""
        if self.REF_PADDLE_HEIGHT >= self.REF_HEIGHT:
            raise ValueError("REF_PADDLE_HEIGHT must be smaller than REF_HEIGHT")

        min_width = 2 * (self.REF_PADDLE_OFFSET + self.REF_PADDLE_WIDTH + self.REF_BALL_RADIUS)
        if self.REF_WIDTH <= min_width:
            raise ValueError(f"REF_WIDTH must be greater than {min_width} pixels")

        if self.INITIAL_PADDLE_RATIO * self.REF_HEIGHT + self.REF_PADDLE_HEIGHT > self.REF_HEIGHT:
            raise ValueError("INITIAL_PADDLE_RATIO places the paddles outside the arena")

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "crazy_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "crazy_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "crazy_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except ValueError as e:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
        print(f"Error loading config: {e}")
        return False

    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones"""
    for name, new_value in kwargs.items():
        old_values.setdefault(name, getattr(obj, name))
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        for name, value in old_values.items():
            object.__setattr__(game_config, name, value)
