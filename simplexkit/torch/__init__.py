"""PyTorch integration for simplexkit.

Requires the optional ``torch`` dependency.

Example:
    >>> import torch
    >>> from simplexkit.torch import TorchObjective
    >>> f = TorchObjective(lambda t: (t ** 2).sum())
    >>> f([1.0, 2.0])
    5.0
"""

from simplexkit.torch.objective import TorchObjective

__all__ = ["TorchObjective"]
