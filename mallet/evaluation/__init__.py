from mallet.evaluation.evaluator import evaluate, apply_native

__all__ = ["evaluate", "apply_native"]
