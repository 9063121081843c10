from .traversal import depth_first, breadth_first
from .paths import PathResult, iter_paths, find_all_paths

__all__ = [
    'depth_first',
    'breadth_first',
    'PathResult',
    'iter_paths',
    'find_all_paths',
]
