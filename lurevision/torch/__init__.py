"""
GPU-accelerated LureVision implementation backed by PyTorch.
"""

from lurevision.torch.pipeline import TorchLureVisionProcessor

__all__ = ["TorchLureVisionProcessor"]
