"""Adapter turning tensor-valued PyTorch functions into NumPy objectives."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
import torch


class TorchObjective:
    """
    Wrap ``fn(torch.Tensor) -> torch.Tensor`` as ``f(np.ndarray) -> float``.

    Points are converted to float64 tensors on ``device`` and evaluated under
    ``torch.no_grad``. The result must hold exactly one element.

    Parameters
    ----------
    fn:
        Function of a 1-D tensor returning a scalar tensor.
    device:
        Device on which to evaluate. Defaults to the CPU.

    Example
    -------
    >>> import torch
    >>> from simplexkit.optimize import GoalType, NelderMead
    >>> from simplexkit.torch import TorchObjective
    >>> f = TorchObjective(lambda t: ((t - 3.0) ** 2).sum())
    >>> best = NelderMead().optimize(f, GoalType.MINIMIZE, [0.0])
    """

    def __init__(
        self,
        fn: Callable[[torch.Tensor], torch.Tensor],
        device: Optional[torch.device] = None,
    ):
        self.fn = fn
        self.device = device if device is not None else torch.device("cpu")

    def to_tensor(self, x: np.ndarray) -> torch.Tensor:
        """Convert a point to a 1-D float64 tensor on ``self.device``."""
        arr = np.asarray(x, dtype=np.float64).reshape(-1)
        return torch.as_tensor(arr.copy(), dtype=torch.float64, device=self.device)

    def __call__(self, x: np.ndarray) -> float:
        with torch.no_grad():
            out = self.fn(self.to_tensor(x))
        if not isinstance(out, torch.Tensor):
            return float(out)
        if out.numel() != 1:
            raise ValueError(f"Objective must return a scalar, got shape {tuple(out.shape)}")
        return float(out.detach().cpu().item())


__all__ = ["TorchObjective"]
