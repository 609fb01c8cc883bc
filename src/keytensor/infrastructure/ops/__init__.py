from .elementwise import add, divide, multiply, subtract

__all__ = [
    add.__name__,
    divide.__name__,
    multiply.__name__,
    subtract.__name__,
]
