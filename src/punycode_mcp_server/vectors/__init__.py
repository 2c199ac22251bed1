from .manager import VectorManager, equal_nocase

__all__ = ["VectorManager", "equal_nocase"]
