"""Normal-distribution approximations and volatility estimators."""

from effort_pricing.model.normal import ErfNormalDistribution, HartNormalDistribution
from effort_pricing.model.volatility import HistoricalVolatilityEstimator

# Registries for string-based lookup
NORMAL_DISTRIBUTIONS: dict[str, type] = {
    "hart": HartNormalDistribution,
    "erf": ErfNormalDistribution,
}

VOLATILITY_ESTIMATORS: dict[str, type] = {
    "historical": HistoricalVolatilityEstimator,
}


def _lookup(registry: dict[str, type], kind: str, name: str):
    if name not in registry:
        available = ", ".join(registry.keys())
        raise ValueError(f"Unknown {kind} '{name}'. Available: {available}")
    return registry[name]()


def get_normal_distribution(name: str):
    """Instantiate a normal CDF approximation by name.
    
    Args:
        name: Registry key (e.g., "hart", "erf")
        
    Returns:
        Instance implementing the NormalDistribution protocol
        
    Raises:
        ValueError: If name not found in registry
    """
    return _lookup(NORMAL_DISTRIBUTIONS, "normal distribution", name)


def get_volatility_estimator(name: str):
    """Instantiate a volatility estimator by name.
    
    Raises:
        ValueError: If name not found in registry
    """
    return _lookup(VOLATILITY_ESTIMATORS, "volatility estimator", name)
