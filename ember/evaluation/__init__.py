"""Evaluator, function application and special forms."""
