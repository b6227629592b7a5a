"""Portfolio site generator with typing and reveal animation engines."""
