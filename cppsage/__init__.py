"""
cppsage: project scaffolding and CMake/Conan build orchestration for C++.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = ["__version__"]
