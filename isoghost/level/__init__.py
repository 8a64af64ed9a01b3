from .level import Tile, Level, Position
from .level_generator import generate_level, remove_invalid_bridge_directions, find_invalid_bridge_directions
from .config_loader import RuntimeConfig, load_runtime_config

__all__ = [
    "Tile",
    "Level",
    "Position",
    "generate_level",
    "remove_invalid_bridge_directions",
    "find_invalid_bridge_directions",
    "RuntimeConfig",
    "load_runtime_config",
]
