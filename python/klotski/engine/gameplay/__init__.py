from klotski.engine.gameplay.moves import Move, block_cells, slide, successors

__all__ = ["Move", "block_cells", "slide", "successors"]
