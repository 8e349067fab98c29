"""
OpenAPI Specification Scorer Package.
Validates OpenAPI specifications and grades them against a weighted quality rubric.
"""

from .cli import main_cli

__version__ = "0.1.0"
__author__ = "Spec Score Team"
__description__ = "Validate and score OpenAPI specifications against a quality rubric"

# Make CLI main function available at package level
__all__ = ["main_cli"]
