from .arithmetic import TensorMixinArithmetic
from .broadcast import TensorMixinBroadcast
from .memory import TensorMixinMemory
from .reduction import TensorMixinReduction
from .transform import TensorMixinTransform

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinBroadcast.__name__,
    TensorMixinMemory.__name__,
    TensorMixinReduction.__name__,
    TensorMixinTransform.__name__,
]
