from tilesolver.engine.scheduler.queue import MinPriorityQueue

__all__ = ["MinPriorityQueue"]
