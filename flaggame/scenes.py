"""Scene switching and the per-frame update/draw cycle."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Mapping

FAST_STEPS = 8


class DebugMode(Enum):
    """How the debug keys change the game speed."""

    NONE = 0
    PAUSE = 1
    SLOW = 2
    FAST1 = 3


class Scene:
    """One screen of the game; subclasses override what they need."""

    def enter(self) -> None:
        """Prepare the scene when it becomes current."""

    def leave(self) -> None:
        """Release what the scene holds when another takes over."""

    def update(self) -> None:
        """Advance the scene's logic by one step."""

    def draw(self) -> None:
        """Render the scene."""


class SceneManager:
    """Runs the current scene and switches to a requested one.

    A request for a name that is not among ``scenes`` ends the game
    loop at the next update.
    """

    def __init__(self, scenes: Mapping[Hashable, Scene], initial: Hashable) -> None:
        self.scenes = dict(scenes)
        self.current: Hashable | None = None
        self.requested: Hashable = initial

    def request(self, name: Hashable) -> None:
        """Ask for ``name`` to become the current scene."""
        self.requested = name

    def _switch(self) -> None:
        old = self.scenes.get(self.current)
        if old is not None:
            old.leave()
        self.current = self.requested
        new = self.scenes.get(self.current)
        if new is not None:
            new.enter()

    def step(self, debug_mode: DebugMode = DebugMode.NONE, frame_count: int = 0) -> bool:
        """Run one frame; return False once the game should stop."""
        running = True
        runs_logic = (
            debug_mode is DebugMode.NONE
            or debug_mode is DebugMode.FAST1
            or (debug_mode is DebugMode.SLOW and frame_count % 2 == 0)
        )
        if runs_logic:
            steps = FAST_STEPS if debug_mode is DebugMode.FAST1 else 1
            for _ in range(steps):
                if self.requested != self.current:
                    self._switch()
                scene = self.scenes.get(self.current)
                if scene is None:
                    running = False
                else:
                    scene.update()

        scene = self.scenes.get(self.current)
        if scene is not None:
            scene.draw()
        return running