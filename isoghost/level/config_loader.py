"""Runtime configuration loader (seed and ghost colour)."""

import json
import logging
import os
import random
from typing import NamedTuple

from config import RUNTIME_CONFIG_PATH, DEFAULT_SEED
from ..tiles.tile_types import GhostFrame

logger = logging.getLogger(__name__)


class RuntimeConfig(NamedTuple):
    seed_mode: str
    seed: int
    ghost_frame: GhostFrame

    def make_rng(self) -> random.Random:
        """Random generator for level generation: seeded in fixed mode, fresh otherwise."""
        if self.seed_mode == "fixed":
            return random.Random(self.seed)
        return random.Random()


def load_runtime_config(config_path: str = RUNTIME_CONFIG_PATH) -> RuntimeConfig:
    """Load runtime toggles (seed_mode, seed, ghost_frame) with safe defaults."""
    seed_mode = "random"
    seed = DEFAULT_SEED
    ghost_frame = GhostFrame.ORANGE

    if not os.path.exists(config_path):
        logger.debug("Runtime config not found: %s, using defaults", config_path)
        return RuntimeConfig(seed_mode=seed_mode, seed=seed, ghost_frame=ghost_frame)

    try:
        with open(config_path, 'r') as f:
            data = json.load(f) or {}
    except (OSError, ValueError) as e:
        logger.warning("Error loading config %s: %s, using defaults", config_path, e)
        return RuntimeConfig(seed_mode=seed_mode, seed=seed, ghost_frame=ghost_frame)

    cfg = data.get('game_config', {})
    seed_mode = str(cfg.get('seed_mode', seed_mode))
    # normalize seed_mode
    if seed_mode not in ("fixed", "random"):
        logger.warning("Unknown seed_mode %r, using 'random'", seed_mode)
        seed_mode = "random"
    try:
        seed = int(cfg.get('seed', seed))
    except (TypeError, ValueError):
        seed = DEFAULT_SEED
    frame_name = str(cfg.get('ghost_frame', ghost_frame.name)).upper()
    try:
        ghost_frame = GhostFrame[frame_name]
    except KeyError:
        logger.warning("Unknown ghost_frame %r, using %s", frame_name, GhostFrame.ORANGE.name)
        ghost_frame = GhostFrame.ORANGE

    return RuntimeConfig(seed_mode=seed_mode, seed=seed, ghost_frame=ghost_frame)
