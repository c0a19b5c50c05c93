"""Application services orchestrating adapters behind core interfaces."""
