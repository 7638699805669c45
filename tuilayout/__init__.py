"""Layout primitives for terminal user interfaces: text wrapping, borders, size distribution, flow bookkeeping and placement."""

__version__ = "0.1.0"
__all__ = ["border", "distribute", "flow", "placement", "textlayout"]