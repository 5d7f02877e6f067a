"""CPU scheduling simulations, banker's-algorithm deadlock avoidance, an integer postfix calculator and small containers."""

__version__ = "0.1.0"