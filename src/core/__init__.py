"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of any front-end (rendering, windowing, input devices).
"""
