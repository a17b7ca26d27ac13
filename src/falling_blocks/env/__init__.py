"""Gymnasium environments for falling_blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="FallingBlocks-v0",
    entry_point="falling_blocks.env.tetris_env:FallingBlocksEnv",
)

__all__ = ["FallingBlocks-v0"]
