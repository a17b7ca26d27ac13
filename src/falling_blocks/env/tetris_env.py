from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, GameConfig, PieceSource, ScoringRules, TetrisGame
from falling_blocks.visualization.palette import grid_to_rgb


# Reset is the env's own reset(), not an agent action
AGENT_ACTIONS = (
    Action.MOVE_LEFT,
    Action.MOVE_RIGHT,
    Action.MOVE_DOWN,
    Action.ROTATE,
    Action.HARD_DROP,
    Action.HOLD,
)


class FallingBlocksEnv(gym.Env):
    """Drives a :class:`TetrisGame` from an agent.

    Each step applies one command, then advances a virtual frame clock by
    ``frames_per_step`` frames and ticks the session once.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        piece_source: Optional[PieceSource] = None,
        render_mode: Optional[str] = None,
        frames_per_step: int = 1,
        frame_ms: float = 1000.0 / 60.0,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.game = TetrisGame(config, rules, piece_source)
        self.render_mode = render_mode
        self.frames_per_step = int(frames_per_step)
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.game.grid.height, self.game.grid.width
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8),
                "next": spaces.Discrete(8),
            }
        )
        self.action_space = spaces.Discrete(len(AGENT_ACTIONS))

        self._clock_ms = 0.0
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.get_state().astype(np.int8),
            "next": int(self.game.next_piece.color),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared": self.game.lines_cleared_total,
            "level": self.game.level,
            "drop_interval_ms": self.game.drop_interval_ms,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._clock_ms = 0.0
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.apply(AGENT_ACTIONS[int(action)])
        self._clock_ms += self.frames_per_step * self.frame_ms
        self.game.tick(self._clock_ms)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            return grid_to_rgb(self.game.get_state())
        return None

    def close(self) -> None:
        pass
