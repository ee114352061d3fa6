from tilesolver.engine.heuristics.heuristic import Heuristic

__all__ = ["Heuristic"]
