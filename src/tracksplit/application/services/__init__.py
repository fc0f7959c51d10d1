from .split_service import SplitService

__all__ = ["SplitService"]
