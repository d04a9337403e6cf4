"""Interactive console session.

A thin read-validate-retry adapter around the estimation core: it collects
tasks from the user, resolves volatilities, runs the forecaster and prints
the summary table and risk analysis. Prompts and output go through
injectable callables so sessions can be scripted.
"""

import logging
import math
from typing import Callable

from effort_pricing.data.volatility import resolve_history_volatility
from effort_pricing.engine.estimation import TaskEstimation, TaskSpec, estimate_task
from effort_pricing.engine.forecaster import EffortForecaster
from effort_pricing.model.interfaces import VolatilityEstimator
from effort_pricing.model.volatility import HistoricalVolatilityEstimator
from effort_pricing.report.text import render_risk_analysis, render_summary_table

logger = logging.getLogger(__name__)

YES_ANSWERS = {"y", "yes", "д", "да"}


def _positive(name: str) -> Callable[[float], float]:
    def check(value: float) -> float:
        if value <= 0:
            raise ValueError(f"{name} must be positive")
        return value
    return check


def _nonzero(values: list[float]) -> list[float]:
    if any(v == 0 for v in values):
        raise ValueError("Planned efforts must be non-zero")
    return values


class ConsoleSession:
    """Collects tasks from a console and reports their forecasts."""
    
    def __init__(
        self,
        forecaster: EffortForecaster | None = None,
        estimator: VolatilityEstimator | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        """Initialize the session.
        
        Args:
            forecaster: Forecaster to use, defaults to the polynomial CDF
            estimator: Historical volatility estimator
            input_fn: Reads one line given a prompt
            output_fn: Writes one message
        """
        self.forecaster = forecaster or EffortForecaster()
        self.estimator = estimator or HistoricalVolatilityEstimator()
        self.input_fn = input_fn
        self.output_fn = output_fn
    
    def prompt_number(
        self,
        prompt: str,
        validator: Callable[[float], float] | None = None,
    ) -> float:
        """Ask until the answer parses as a number and passes the validator."""
        while True:
            raw = self.input_fn(prompt)
            try:
                value = float(raw.strip().replace(",", "."))
                if not math.isfinite(value):
                    raise ValueError(f"'{raw.strip()}' is not a finite number")
                return validator(value) if validator else value
            except ValueError as e:
                self.output_fn(f"Error: {e}")
    
    def prompt_list(
        self,
        prompt: str,
        validator: Callable[[list[float]], list[float]] | None = None,
    ) -> list[float]:
        """Ask until the answer parses as finite numbers and passes the validator."""
        while True:
            raw = self.input_fn(prompt)
            try:
                values = [float(part.strip()) for part in raw.split(",")]
            except ValueError:
                self.output_fn("Invalid format. Enter numbers separated by commas (e.g. 10, 20, 30.5)")
                continue
            try:
                if not all(math.isfinite(v) for v in values):
                    raise ValueError("All efforts must be finite numbers")
                return validator(values) if validator else values
            except ValueError as e:
                self.output_fn(f"Error: {e}")
    
    def prompt_choice(self, prompt: str, options: dict[str, str]) -> str:
        """Ask until the answer is one of the option keys.
        
        Args:
            prompt: Question shown before the options
            options: Mapping from answer key to description
            
        Returns:
            The chosen key
        """
        self.output_fn(prompt)
        for key, description in options.items():
            self.output_fn(f"  {key} - {description}")
        while True:
            answer = self.input_fn("Your choice: ").strip()
            if answer in options:
                return answer
            self.output_fn(f"Error: choose one of {', '.join(options)}")
    
    def prompt_yes_no(self, prompt: str) -> bool:
        return self.input_fn(prompt).strip().lower() in YES_ANSWERS
    
    def volatility_from_history(self) -> float:
        """Estimate a volatility from user-supplied historical efforts."""
        self.output_fn("Volatility from historical data")
        planned = self.prompt_list(
            "Planned efforts of completed tasks (comma-separated): ", _nonzero
        )
        actual = self.prompt_list("Actual efforts of the same tasks (comma-separated): ")
        return resolve_history_volatility(planned, actual, estimator=self.estimator)
    
    def prompt_volatility(self) -> float:
        choice = self.prompt_choice(
            "How should the volatility be obtained?",
            {"1": "Estimate from historical data", "2": "Enter a value"},
        )
        if choice == "1":
            return self.volatility_from_history()
        return self.prompt_number(
            "Volatility (sigma), e.g. 0.25 for 25%: ", _positive("Volatility")
        )
    
    def prompt_task(self, volatility: float | None) -> TaskSpec:
        """Collect one task, asking for its volatility if none is shared."""
        name = self.input_fn("Task name: ").strip()
        current = self.prompt_number(
            "Current effort estimate S (hours): ", _positive("Current estimate")
        )
        target = self.prompt_number("Target effort K (hours): ", _positive("Target effort"))
        deadline = self.prompt_number(
            "Time to deadline T (years): ", _positive("Time to deadline")
        )
        rate = self.prompt_number("Risk-free rate r (team productivity growth, e.g. 0.05): ")
        if volatility is None:
            volatility = self.prompt_volatility()
        return TaskSpec(
            name=name,
            current_estimate=current,
            target_effort=target,
            time_to_deadline=deadline,
            volatility=volatility,
            risk_free_rate=rate,
        )
    
    def run(self) -> list[TaskEstimation]:
        """Run a full session and print the results.
        
        Returns:
            Estimated tasks in entry order
        """
        self.output_fn("Effort estimation with the Black-Scholes model")
        mode = self.prompt_choice(
            "Volatility mode:",
            {"1": "Common volatility for all tasks", "2": "Individual volatility per task"},
        )
        common = None
        if mode == "1":
            common = self.prompt_volatility()
            self.output_fn(f"Common volatility: {common:.2%}")
        
        tasks = []
        while True:
            self.output_fn("New task")
            spec = self.prompt_task(common)
            tasks.append(estimate_task(spec, self.forecaster))
            logger.debug(f"Estimated task '{spec.name}': {tasks[-1].forecast:.2f} h")
            if not self.prompt_yes_no("Add another task? (y/n): "):
                break
        
        self.output_fn(render_summary_table(tasks))
        self.output_fn(render_risk_analysis(tasks))
        return tasks
