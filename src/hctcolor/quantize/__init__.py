"""Image color quantization: Wu box cutting, WSMeans refinement, Celebi pipeline."""

from .celebi import quantize_celebi
from .wsmeans import QuantizerResult, quantize_wsmeans
from .wu import quantize_wu

__all__ = ["QuantizerResult", "quantize_celebi", "quantize_wsmeans", "quantize_wu"]
