"""Optional integrations looked up at formatting time."""

import logging
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from markup_bridge.formatting.ir import StyledText

logger = logging.getLogger("markup_bridge.hooks")

H = TypeVar("H")


@runtime_checkable
class PlaceholderHook(Protocol):
    """Substitutes placeholders while parsing markup for an audience."""

    def format(self, markup: str, audience: Any) -> StyledText:
        ...


class HookRegistry:
    """Holds hook instances and resolves them by capability.

    A lookup returns the most recently registered hook that satisfies the
    requested type, so a later registration overrides an earlier one.
    """

    def __init__(self) -> None:
        self._hooks: list[object] = []

    def register(self, hook: object) -> None:
        """Add a hook. Raises TypeError if it has no callable ``format``."""
        if not callable(getattr(hook, "format", None)):
            raise TypeError(f"Hook {hook!r} has no callable 'format' method")
        self._hooks.append(hook)
        logger.debug("Registered hook %r", hook)

    def unregister(self, hook: object) -> None:
        """Remove a hook if present."""
        if hook in self._hooks:
            self._hooks.remove(hook)

    def get(self, hook_type: type[H]) -> Optional[H]:
        """Return the latest hook that is an instance of ``hook_type``."""
        for hook in reversed(self._hooks):
            if isinstance(hook, hook_type):
                return hook
        return None

    def __len__(self) -> int:
        return len(self._hooks)
