from enum import Enum

from incident_tracker.domain.errors import ConfigurationError


class Environment(Enum):
    """
    Value Object for the ticketing/escalation environment.
    """
    DEV = "dev"
    QA = "qa"
    PROD = "prod"

    @staticmethod
    def parse(value) -> "Environment":
        if isinstance(value, Environment):
            return value
        for env in Environment:
            if env.value == value:
                return env
        raise ConfigurationError(
            f"Invalid environment: {value}, expected one of: dev, qa, prod"
        )

    def __str__(self) -> str:
        return self.value
