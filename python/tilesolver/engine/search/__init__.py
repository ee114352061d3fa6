from tilesolver.engine.search.solver import (
    UNSOLVED,
    SearchNode,
    SearchResult,
    Solver,
    hint,
    solve,
)

__all__ = ["UNSOLVED", "SearchNode", "SearchResult", "Solver", "hint", "solve"]
