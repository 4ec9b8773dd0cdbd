from klotski.engine.graphbuilder.builder import Graph, GraphBuilder

__all__ = ["Graph", "GraphBuilder"]
