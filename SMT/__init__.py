__version__ = "1.0.0"

TOOL_NAME = "SMT"
