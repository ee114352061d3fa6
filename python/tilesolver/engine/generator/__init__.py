from tilesolver.engine.generator.generator import BoardGenerator

__all__ = ["BoardGenerator"]
