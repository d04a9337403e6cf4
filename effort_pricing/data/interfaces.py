"""Data provider protocol definitions.

Defines where task specifications come from, so batch estimation works the
same for config files, console sessions or future sources.
"""

from typing import Protocol

from effort_pricing.engine.estimation import TaskSpec


class TaskProvider(Protocol):
    """Provides fully resolved task specifications."""
    
    def get_tasks(self) -> list[TaskSpec]:
        """Get all tasks with their volatilities resolved.
        
        Returns:
            TaskSpec list in input order
        """
        ...
