"""
Tensor control-path manager for element-kind-specific dispatch.

This module defines a shared control-path manager used to register and resolve
element-kind-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method
dispatch is performed based on the runtime value of ``self.kind`` on
Tensor objects.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, ElementKind.INTEGRAL)
    def op_integral(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, ElementKind.INEXACT)
    def op_inexact(self, ...): ...

Notes
-----
All control paths registered via this manager share a single internal
registry.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.kind`
tensor_control_path_manager = create_path_builder("kind")
