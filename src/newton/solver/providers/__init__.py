from .gemini import GeminiSolverClient

__all__ = ["GeminiSolverClient"]
