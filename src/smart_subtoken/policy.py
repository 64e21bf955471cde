from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import SmartTokenConfig

__all__ = [
    "DepthPolicy",
    "InterpolatedDepthPolicy",
    "UnboundedDepthPolicy",
    "create_depth_policy",
    "build_depth_policy_from_config",
]


class DepthPolicy(ABC):
    """Maps a word length (in code points) to the subtoken window depth."""

    @abstractmethod
    def get_depth(self, length: int) -> int:
        """Return a non-negative window depth for a word of ``length`` characters."""
        raise NotImplementedError


class InterpolatedDepthPolicy(DepthPolicy):
    """
    Clamped linear mapping from length to depth.

    Words no longer than ``max_length`` get ``max_depth``, words at least
    ``min_length`` long get ``min_depth`` and lengths in between are
    interpolated (truncated toward zero). With the usual
    ``max_length < min_length`` and ``max_depth > min_depth`` short words get
    deep windows and long words get shallow ones.
    """

    def __init__(
        self, max_length: int, max_depth: int, min_length: int, min_depth: int
    ) -> None:
        for label, value in (
            ("max_length", max_length),
            ("max_depth", max_depth),
            ("min_length", min_length),
            ("min_depth", min_depth),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{label} must be an integer, got {value!r}.")
        if max_depth < 0 or min_depth < 0:
            raise ValueError(
                f"Depth bounds must be non-negative, got max_depth={max_depth}, "
                f"min_depth={min_depth}."
            )
        self.max_length = max_length
        self.max_depth = max_depth
        self.min_length = min_length
        self.min_depth = min_depth

    def get_depth(self, length: int) -> int:
        # The max_* pair bounds short words and the min_* pair bounds long ones.
        if length <= self.max_length:
            return self.max_depth
        if length >= self.min_length:
            return self.min_depth
        span = self.min_length - self.max_length
        return int(
            self.min_depth
            + (self.max_depth - self.min_depth) * (self.min_length - length) / span
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_length={self.max_length}, "
            f"max_depth={self.max_depth}, min_length={self.min_length}, "
            f"min_depth={self.min_depth})"
        )


class UnboundedDepthPolicy(DepthPolicy):
    """Window spans the whole word: depth equals length."""

    def get_depth(self, length: int) -> int:
        return max(0, length)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def create_depth_policy(name: str, **kwargs: Any) -> DepthPolicy:
    """Factory for building depth policies by name."""
    normalized = name.lower().strip()
    if normalized in {"interpolated", "linear"}:
        return InterpolatedDepthPolicy(**kwargs)
    if normalized in {"unbounded", "identity"}:
        return UnboundedDepthPolicy()
    raise ValueError(f"Unknown depth policy '{name}'.")


def build_depth_policy_from_config(config: "SmartTokenConfig") -> DepthPolicy:
    """Convenience helper to build a depth policy from SmartTokenConfig."""
    settings = config.depth_policy
    normalized = settings.name.lower().strip()
    if normalized in {"interpolated", "linear"}:
        return create_depth_policy(
            settings.name,
            max_length=settings.max_length,
            max_depth=settings.max_depth,
            min_length=settings.min_length,
            min_depth=settings.min_depth,
        )
    return create_depth_policy(settings.name)
