"""
Wave sizing and countdown budgets.

Pure functions of the wave number. Wave N holds
``base_size + increment * (N - 1)`` targets and gets
``max(min_budget, max_budget - step * (N - 1))`` milliseconds, where
``step = (max_budget - min_budget) / (total_waves - 1)``.

Examples:
    >>> policy = SpawnPolicy(WaveConfig())
    >>> policy.wave_size(20)
    80
    >>> policy.time_budget_ms(1)
    60000.0
"""

from models import WaveConfig


class SpawnPolicy:
    """Computes wave size and time budget from the wave number.

    Args:
        config: Wave progression settings

    Raises:
        ValueError: If total_waves <= 1 (the budget step is undefined) or
            the budget range is inverted
    """

    def __init__(self, config: WaveConfig):
        # model_construct() skips validation, so check again here
        if config.total_waves <= 1:
            raise ValueError(f"total_waves must be greater than 1, got {config.total_waves}")
        if config.min_budget_ms > config.max_budget_ms:
            raise ValueError("min_budget_ms must not exceed max_budget_ms")
        self._config = config
        self._step = (config.max_budget_ms - config.min_budget_ms) / (config.total_waves - 1)

    @property
    def total_waves(self) -> int:
        return self._config.total_waves

    @property
    def increment(self) -> int:
        return self._config.increment

    @property
    def budget_step_ms(self) -> float:
        """Countdown reduction per wave."""
        return self._step

    def wave_size(self, wave_number: int) -> int:
        """Number of targets spawned in ``wave_number``."""
        return self._config.base_size + self._config.increment * (wave_number - 1)

    def time_budget_ms(self, wave_number: int) -> float:
        """Countdown for ``wave_number``, never below the configured floor."""
        budget = self._config.max_budget_ms - self._step * (wave_number - 1)
        return max(self._config.min_budget_ms, budget)
