from .camera import Camera
from .score import ScoreTracker

__all__ = ["Camera", "ScoreTracker"]
