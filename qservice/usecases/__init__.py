"""
Application use cases, one class per operation.
"""

from .base import BaseUseCase, UseCaseInput
from .category import *  # noqa: F401,F403
from .post import *  # noqa: F401,F403
from .category import __all__ as _category_all
from .post import __all__ as _post_all

__all__ = ["BaseUseCase", "UseCaseInput", *_category_all, *_post_all]
