"""
Lambda handlers package for AWS Lambda functions.
"""
from .energy import handler

__all__ = ["handler"]
