"""
Composing Contracts - Combinator Algebra for Financial Contracts

Describes derivative contracts (bonds, options, swaps) as compositions of a
small set of primitive combinators and values any composition with a single
evaluator that maps a contract and a date to a value process.
"""

__version__ = "0.1.0"
__author__ = "Composing Contracts Team"
