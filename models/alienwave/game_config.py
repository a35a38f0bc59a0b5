"""
Pydantic v2 models for game YAML configuration.

These models validate the tunables of the wave engine: wave progression,
countdown budgets, and target motion, hit-box and timing parameters.
"""

from pydantic import BaseModel, Field, computed_field, model_validator


class WaveConfig(BaseModel):
    """
    Wave progression and countdown configuration.

    Wave N spawns ``base_size + increment * (N - 1)`` targets and gets a
    countdown that shrinks linearly from ``max_budget_ms`` at wave 1 to
    ``min_budget_ms`` at the final wave.
    """
    model_config = {"frozen": True}

    total_waves: int = Field(
        default=20,
        description="Number of waves in a run (must be at least 2)",
        gt=1
    )
    base_size: int = Field(
        default=4,
        description="Targets spawned in wave 1",
        ge=1
    )
    increment: int = Field(
        default=4,
        description="Additional targets per wave",
        ge=0
    )
    max_budget_ms: float = Field(
        default=60000.0,
        description="Countdown of wave 1 in milliseconds",
        gt=0.0
    )
    min_budget_ms: float = Field(
        default=20000.0,
        description="Countdown floor in milliseconds",
        gt=0.0
    )

    @model_validator(mode='after')
    def validate_budget_range(self) -> 'WaveConfig':
        """Ensure the countdown floor does not exceed the starting budget."""
        if self.min_budget_ms > self.max_budget_ms:
            raise ValueError(
                f"min_budget_ms ({self.min_budget_ms}) must not exceed "
                f"max_budget_ms ({self.max_budget_ms})"
            )
        return self


class TargetConfig(BaseModel):
    """
    Target properties shared by every spawned target.

    Sizes are sprite pixels before scaling; the rendered footprint is
    ``max(width, height) * scale``.
    """
    model_config = {"frozen": True}

    width: float = Field(default=200.0, description="Sprite frame width", gt=0.0)
    height: float = Field(default=200.0, description="Sprite frame height", gt=0.0)
    scale: float = Field(default=0.3, description="Render scale of the sprite", gt=0.0)
    speed: float = Field(
        default=1.5,
        description="Seek speed in pixels per tick",
        gt=0.0
    )
    arrival_epsilon: float = Field(
        default=5.0,
        description="Distance at which a target stops and idles",
        ge=0.0
    )
    hit_margin: float = Field(
        default=10.0,
        description="Hit-box growth on every side in pixels",
        ge=0.0
    )
    dying_duration_ms: float = Field(
        default=1000.0,
        description="Time a hit target stays in the dying state",
        gt=0.0
    )
    retarget_min_ms: float = Field(
        default=2500.0,
        description="Shortest re-target interval",
        gt=0.0
    )
    retarget_max_ms: float = Field(
        default=5500.0,
        description="Longest re-target interval",
        gt=0.0
    )
    animation_speed: float = Field(
        default=1.0,
        description="Animation speed multiplier (2.0 = frames advance twice as often)",
        gt=0.0
    )

    @computed_field
    @property
    def footprint(self) -> float:
        """Square side used for clamping and hit-boxes."""
        return max(self.width * self.scale, self.height * self.scale)

    @model_validator(mode='after')
    def validate_retarget_range(self) -> 'TargetConfig':
        """Ensure the re-target interval range is ordered."""
        if self.retarget_min_ms > self.retarget_max_ms:
            raise ValueError("retarget_min_ms must not exceed retarget_max_ms")
        return self


class GameConfig(BaseModel):
    """
    Complete game configuration from YAML.

    Top-level model bundling metadata with wave and target settings.
    """
    model_config = {"frozen": True}

    name: str = Field(default="Alien Waves", description="Human-readable name")
    id: str = Field(default="classic", description="Unique identifier")
    version: str = Field(default="1.0.0", description="Version string")
    description: str = Field(default="", description="Detailed description")
    wave: WaveConfig = Field(default_factory=WaveConfig)
    target: TargetConfig = Field(default_factory=TargetConfig)
