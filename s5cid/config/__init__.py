from .loader import load_config
from .models import S5CidConfig

__all__ = [
    "S5CidConfig",
    "load_config",
]
