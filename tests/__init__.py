"""
Test suite for calc3d-core

Contains:
- tests/unit/          : Unit tests for primitives, evaluator, session and tools
"""
