"""Named fit configuration and a factory for regression models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..errors import InvalidArgumentError
from ..matrix import Matrix
from .base import LinearRegression, LogisticRegression, Regression
from .utils import check_epochs


class Strategy(Enum):
    """Update granularity of a gradient-descent fit."""

    BATCH = "batch"
    MINI_BATCH = "mini_batch"
    STOCHASTIC = "stochastic"


_MODELS: dict[str, type[Regression]] = {
    "linear": LinearRegression,
    "logistic": LogisticRegression,
}


def _coerce_strategy(strategy: Union[Strategy, str]) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(str(strategy).lower().replace("-", "_"))
    except ValueError as exc:
        supported = ", ".join(s.value for s in Strategy)
        raise InvalidArgumentError(
            f"Unsupported strategy {strategy!r}. Supported: {supported}."
        ) from exc


@dataclass(frozen=True)
class FitConfig:
    """
    Settings for one gradient-descent fit.

    Args:
        alpha: Learning rate. Not range-checked; zero or negative values are
            accepted.
        epochs: Number of outer passes. Must be non-negative.
        strategy: ``Strategy`` member or its name ("batch", "mini_batch",
            "stochastic"). Defaults to batch.
        mini_batch_size: Rows per block. Required for mini-batch fits and
            must be positive.
    """

    alpha: float
    epochs: int
    strategy: Union[Strategy, str] = Strategy.BATCH
    mini_batch_size: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", _coerce_strategy(self.strategy))
        object.__setattr__(self, "epochs", check_epochs(self.epochs))
        if self.strategy is Strategy.MINI_BATCH:
            if self.mini_batch_size is None:
                raise InvalidArgumentError("mini_batch_size is required for mini-batch fits.")
            if self.mini_batch_size < 1:
                raise InvalidArgumentError(
                    f"mini_batch_size must be positive, got {self.mini_batch_size}."
                )


def create_regression(
    kind: str, x: Any, y: Any, initial_theta: Any, config: FitConfig
) -> Regression:
    """
    Build a regression model from a configuration.

    Args:
        kind: "linear" or "logistic" (case-insensitive).
        x: ``n x k`` design matrix.
        y: ``n x 1`` targets.
        initial_theta: ``1 x k`` starting parameters.
        config: Fit settings.

    Raises:
        InvalidArgumentError: If ``kind`` is not supported.
    """
    model_cls = _MODELS.get(kind.lower())
    if model_cls is None:
        supported = ", ".join(sorted(_MODELS))
        raise InvalidArgumentError(f"Unsupported regression {kind!r}. Supported: {supported}.")
    return model_cls(x, y, initial_theta, config.alpha, config.epochs)


def fit_regression(
    kind: str, x: Any, y: Any, initial_theta: Any, config: FitConfig
) -> Matrix:
    """Build a model and run the configured strategy, returning theta."""
    model = create_regression(kind, x, y, initial_theta, config)
    if config.strategy is Strategy.MINI_BATCH:
        return model.fit(config.mini_batch_size)
    if config.strategy is Strategy.STOCHASTIC:
        return model.fit_stochastic()
    return model.fit_batch()


__all__ = ["Strategy", "FitConfig", "create_regression", "fit_regression"]
