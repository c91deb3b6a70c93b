"""Square matrices of floats with arithmetic, sum-based comparison, transpose and determinant."""

__version__ = "0.1.0"
__all__ = ["helpers", "ordering", "determinant", "matrix", "demo"]