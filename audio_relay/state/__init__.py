from .runtime import RuntimeDeps
from .settings import AppSettings
from .generation import GenerationState

__all__ = ["AppSettings", "GenerationState", "RuntimeDeps"]
