from klotski.engine.gamesolver.solver import Solution, Solver

__all__ = ["Solution", "Solver"]
