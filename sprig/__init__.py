"""
Evaluation core for a small expression language.
"""
