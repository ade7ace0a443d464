"""Keeps one game controller per chat context."""

from typing import Dict, Optional, Sequence

from game.lifecycle import GameController


class GameRegistry:
    """Maps a context (guild) id to its GameController.

    Controllers are created on first use and live until the context is
    removed, so one context's games never touch another's state.
    """

    def __init__(
        self,
        store,
        phrases: Sequence[str]
    ):
        self.store = store
        self.phrases = phrases
        self._controllers: Dict[str, GameController] = {}

    def get_or_create(self, context_id: str) -> GameController:
        """Get the controller for a context, creating it if needed."""
        context_id = str(context_id)
        controller = self._controllers.get(context_id)
        if controller is None:
            controller = GameController(context_id, self.store, self.phrases)
            self._controllers[context_id] = controller
        return controller

    def get(self, context_id: str) -> Optional[GameController]:
        """Get the controller for a context if one exists."""
        return self._controllers.get(str(context_id))

    def remove(self, context_id: str) -> Optional[GameController]:
        """Drop a context, cancelling any game it has running."""
        controller = self._controllers.pop(str(context_id), None)
        if controller is not None:
            controller.cancel()
        return controller

    def __contains__(self, context_id) -> bool:
        return str(context_id) in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)
