from klotski.engine.canonicalizer.canonical import Canonicalizer

__all__ = ["Canonicalizer"]
