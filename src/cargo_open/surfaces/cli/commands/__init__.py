from .open import register_open_commands
from .utils import get_cargo_open_version, raise_exit

__all__ = [
    "get_cargo_open_version",
    "raise_exit",
    "register_open_commands",
]
