from .ghost import Ghost, GhostState

__all__ = ["Ghost", "GhostState"]
