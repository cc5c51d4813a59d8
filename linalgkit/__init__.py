"""Dense vectors and matrices with LU, QR, eigen and singular value decompositions."""

__version__ = "0.1.0"
__all__ = ["decomposition", "demo", "errors", "matrix", "svd", "vector"]