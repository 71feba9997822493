"""Utility functions and helpers.

This module contains helpers for:
- Loading prompt templates from external files
"""

from chat_playground.utils.prompt_loader import load_prompt_template

__all__ = ["load_prompt_template"]
