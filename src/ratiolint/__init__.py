"""RATIOLINT

A checker for a unit-test naming and ratio convention. Test names follow
``<number>_<positive|negative>``, are numbered monotonically within a file or
suite, and each function under test carries one positive test for every five
negative ones.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
