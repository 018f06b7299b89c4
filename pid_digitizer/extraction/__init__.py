from pid_digitizer.extraction.factory import ModelInvokerFactory
from pid_digitizer.extraction.invoker import ModelInvoker
from pid_digitizer.extraction.models import Component, ComponentStatus, Coordinates
from pid_digitizer.extraction.validator import parse_components

__all__ = [
    "Component",
    "ComponentStatus",
    "Coordinates",
    "ModelInvoker",
    "ModelInvokerFactory",
    "parse_components",
]
