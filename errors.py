"""Exception types shared by the AI gateway and the UI handlers."""


class HealthGuardianError(Exception):
    """Base class for application errors."""


class ConfigurationError(HealthGuardianError):
    """Required configuration (e.g. the AI credential) is missing."""


class AnalysisError(HealthGuardianError):
    """The structured meal analysis call failed for any reason."""


class AdviceError(HealthGuardianError):
    """The conversational health advice call failed for any reason."""
