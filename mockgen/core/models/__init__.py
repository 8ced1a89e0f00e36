"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from mockgen.core.models import GeneratorConfig, OutputUnit, GeneratedFile
"""

from mockgen.core.models.config import GeneratorConfig
from mockgen.core.models.template import GeneratedFile
from mockgen.core.models.unit import OutputUnit

__all__ = [
    # template.py
    "GeneratedFile",
    # config.py
    "GeneratorConfig",
    # unit.py
    "OutputUnit",
]
