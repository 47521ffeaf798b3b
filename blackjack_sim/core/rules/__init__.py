"""
Rule-level helper types.
"""

from .result import ErrorCode, OperationResult

__all__ = ['ErrorCode', 'OperationResult']
