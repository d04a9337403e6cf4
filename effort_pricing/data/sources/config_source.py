"""Config-backed task provider.

Resolves every task's volatility from an EstimationConfig, either from the
shared source in common mode or from each task's own source.
"""

from effort_pricing.config.schema import EstimationConfig, VolatilitySource
from effort_pricing.data.interfaces import TaskProvider
from effort_pricing.data.volatility import resolve_history_volatility
from effort_pricing.engine.estimation import TaskSpec
from effort_pricing.model import get_volatility_estimator


class ConfigTaskProvider(TaskProvider):
    """Provides resolved task specifications from configuration."""
    
    def __init__(self, config: EstimationConfig):
        """Initialize with estimation configuration.
        
        Args:
            config: Validated EstimationConfig
        """
        self.config = config
        self.estimator = get_volatility_estimator(config.volatility_estimator)
    
    def resolve(self, source: VolatilitySource) -> float:
        """Turn a volatility source into a number.
        
        Args:
            source: Direct value or historical efforts
            
        Returns:
            Volatility, floored when derived from history
        """
        if source.value is not None:
            return source.value
        return resolve_history_volatility(
            source.history.planned,
            source.history.actual,
            estimator=self.estimator,
            floor=self.config.min_volatility,
            fallback=self.config.fallback_volatility,
        )
    
    def get_tasks(self) -> list[TaskSpec]:
        """Get all configured tasks with resolved volatilities."""
        common = None
        if self.config.volatility_mode == "common":
            common = self.resolve(self.config.common_volatility)
        
        return [
            TaskSpec(
                name=task.name,
                current_estimate=task.current_estimate,
                target_effort=task.target_effort,
                time_to_deadline=task.time_to_deadline,
                volatility=common if common is not None else self.resolve(task.volatility),
                risk_free_rate=task.risk_free_rate,
            )
            for task in self.config.tasks
        ]
