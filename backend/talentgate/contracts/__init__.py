"""ATS request contracts — every request-body shape the API admits.

Usage:
    from talentgate.contracts import validation_engine

    result = validation_engine.validate("verify_mfa", {"token": "123456"})
"""

from talentgate.contracts import (
    ai,
    applications,
    auth,
    candidates,
    career_site,
    communication,
    interviews,
    jobs,
    offers,
    predictive,
    resume_parser,
    sla,
    surveys,
    talent_pools,
)
from talentgate.validators import ShapeRegistry, ValidationEngine

CONTRACT_MODULES = [
    ai,
    applications,
    auth,
    candidates,
    career_site,
    communication,
    interviews,
    jobs,
    offers,
    predictive,
    resume_parser,
    sla,
    surveys,
    talent_pools,
]


def build_registry() -> ShapeRegistry:
    """Collect the shapes of every contract module into a sealed registry."""
    registry = ShapeRegistry()
    for module in CONTRACT_MODULES:
        registry.register(*module.SHAPES)
    return registry.seal()


registry = build_registry()

# Module-level singleton
validation_engine = ValidationEngine(registry)

__all__ = ["CONTRACT_MODULES", "build_registry", "registry", "validation_engine"]
