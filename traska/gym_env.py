"""Gymnasium environment wrapper for the space race.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"ship": {...}, "status": {...}, "config": {...}}}``

Action space is ``Discrete((2r+1)**2 + 1)`` where ``r`` is the config's
``search_radius``. Index ``i`` below ``(2r+1)**2`` targets the tile at
displacement ``(i % (2r+1) - r, i // (2r+1) - r)`` from the ship; the last
index is the inertia move. Every step costs ``-1`` reward, accepted or not,
so the return is the negated number of actions taken. ``terminated`` is set
on reaching the finish and ``truncated`` when the ship is stranded (no legal
target left).

Usage:

``env = SpaceRaceEnv(config=RaceConfig(grid_size=8))``
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from traska.components import Position, Vector
from traska.config import DEFAULT_CONFIG, RaceConfig
from traska.levels.generator import generate
from traska.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from traska.state import GameState
from traska.step import MoveResult, attempt_inertia_move, attempt_move

ObsType = Dict[str, Any]

STEP_REWARD = -1.0


def ship_observation_dict(state: GameState) -> Dict[str, Any]:
    """Ship sub-observation (position, energy, momentum, move count)."""
    vector = state.vector or Vector(0, 0)
    return {
        "position": np.array([state.position.x, state.position.y], dtype=np.int64),
        "energy": int(state.energy),
        "vector": np.array([vector.dx, vector.dy], dtype=np.int64),
        "has_momentum": int(state.vector is not None),
        "move_count": int(state.move_count),
    }


def status_observation_dict(state: GameState) -> Dict[str, Any]:
    """Status portion of observation (phase, legal move count)."""
    phase = "ongoing"
    if state.won:
        phase = "win"
    elif state.stranded:
        phase = "stranded"
    return {"phase": phase, "legal_moves": len(state.legal_moves)}


def config_observation_dict(state: GameState) -> Dict[str, Any]:
    """Config portion of observation (rule constants and seed)."""
    config = state.config
    return {
        "grid_size": config.grid_size,
        "initial_energy": config.initial_energy,
        "search_radius": config.search_radius,
        "seed": -1 if state.seed is None else int(state.seed),
        "finish": np.array([state.finish.x, state.finish.y], dtype=np.int64),
    }


class SpaceRaceEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` for the vector race.

    Each ``reset`` generates a new map from the environment's RNG, so seeding
    ``reset`` reproduces the whole episode.
    """

    metadata = {"render_modes": ["human", "image"]}

    def __init__(
        self,
        config: RaceConfig = DEFAULT_CONFIG,
        render_mode: str = "image",
        render_resolution: int = DEFAULT_RESOLUTION,
        initial_state_fn: Callable[[RaceConfig, Optional[int]], GameState] = generate,
    ):
        """Create a new environment instance.

        Arguments:
            config: Rule set used for every episode.
            render_mode: "image" to return PIL frames, "human" to open a window.
            render_resolution: Width (pixels) of rendered frames.
            initial_state_fn: ``(config, seed) -> GameState`` level source.
        """
        from gymnasium import spaces

        self.config = config
        self.state: Optional[GameState] = None
        self._initial_state_fn = initial_state_fn
        self._render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)

        radius = config.search_radius
        self._side = 2 * radius + 1
        self._offsets: List[Tuple[int, int]] = [
            (i % self._side - radius, i // self._side - radius)
            for i in range(self._side * self._side)
        ]
        self.inertia_action = len(self._offsets)

        cell_size = max(render_resolution // config.grid_size, 4)
        pixels = cell_size * config.grid_size

        def int_box(low: int, high: int, shape: Tuple[int, ...] = ()) -> spaces.Box:
            return spaces.Box(low=low, high=high, shape=shape, dtype=np.int64)

        # Fuel sits on the odd interior route cells only: grid_size - 1 deposits.
        max_energy = config.initial_energy + config.fuel_max * (config.grid_size - 1)
        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=(pixels, pixels, 4), dtype=np.uint8
                ),
                "info": spaces.Dict(
                    {
                        "ship": spaces.Dict(
                            {
                                "position": int_box(0, config.grid_size - 1, (2,)),
                                "energy": int_box(0, max_energy),
                                "vector": int_box(-config.grid_size, config.grid_size, (2,)),
                                "has_momentum": int_box(0, 1),
                                "move_count": int_box(0, 1_000_000_000),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "phase": spaces.Text(max_length=32),
                                "legal_moves": int_box(0, self._side * self._side),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "grid_size": int_box(2, 10_000),
                                "initial_energy": int_box(0, 1_000_000),
                                "search_radius": int_box(1, 10_000),
                                "seed": int_box(-1, 2**31),
                                "finish": int_box(0, config.grid_size - 1, (2,)),
                            }
                        ),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(self.inertia_action + 1)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode on a freshly generated map."""
        super().reset(seed=seed)
        map_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.state = self._initial_state_fn(self.config, map_seed)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one action.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None
        if not 0 <= int(action) <= self.inertia_action:
            raise ValueError(f"Invalid action: {action}")

        result = self._apply(int(action))
        assert result.state is not None
        self.state = result.state

        obs = self._get_obs()
        terminated = self.state.won
        truncated = self.state.stranded
        info = self._get_info()
        info["success"] = result.success
        info["error"] = None if result.error is None else str(result.error)
        return obs, STEP_REWARD, terminated, truncated, info

    def action_to_target(self, action: int) -> Optional[Position]:
        """Target tile for a displacement action (``None`` for inertia)."""
        assert self.state is not None
        if action == self.inertia_action:
            return None
        dx, dy = self._offsets[action]
        return Position(self.state.position.x + dx, self.state.position.y + dy)

    def action_masks(self) -> np.ndarray:
        """Boolean mask of actions that would move the ship."""
        assert self.state is not None
        mask = np.zeros(self.inertia_action + 1, dtype=bool)
        for action in range(self.inertia_action):
            target = self.action_to_target(action)
            mask[action] = target in self.state.legal_moves
        if self.state.vector is not None:
            mask[self.inertia_action] = (
                self.state.position.offset(self.state.vector) in self.state.legal_moves
            )
        return mask

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "image":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "ship": ship_observation_dict(self.state),
            "status": status_observation_dict(self.state),
            "config": config_observation_dict(self.state),
        }

    def _apply(self, action: int) -> MoveResult:
        assert self.state is not None
        target = self.action_to_target(action)
        if target is None:
            return attempt_inertia_move(self.state)
        return attempt_move(self.state, target)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass
