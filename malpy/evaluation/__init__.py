from malpy.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
