"""
Code Generator

Short human-readable codes for orders and products (e.g. "A1B2C3").
"""

import logging
import secrets
from collections.abc import Awaitable, Callable

from surplus.core.domain import OrderCodeGenerationException

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Generates uppercase hexadecimal codes with collision retry.

    Codes come from ``secrets`` so they are not guessable from one another.
    Uniqueness is checked against the caller's store through an async
    ``exists`` callback.

    Example:
        ```python
        generator = CodeGenerator(length=6, max_attempts=10)
        code = await generator.generate_unique(catalog.order_code_exists)
        ```
    """

    def __init__(
        self,
        length: int = 6,
        max_attempts: int = 10,
        token_source: Callable[[int], str] = secrets.token_hex,
    ):
        if length < 1:
            raise ValueError("Code length must be positive")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.length = length
        self.max_attempts = max_attempts
        self._token_source = token_source

    def generate(self) -> str:
        """Generate one candidate code (not checked for uniqueness)."""
        n_bytes = (self.length + 1) // 2
        return self._token_source(n_bytes)[: self.length].upper()

    async def generate_unique(
        self,
        exists: Callable[[str], Awaitable[bool]],
        kind: str = "order",
    ) -> str:
        """
        Generate a code that ``exists`` reports as unused.

        Args:
            exists: Async predicate returning True when the code is taken
            kind: Label for logs and errors ("order" or "product")

        Returns:
            Unused code

        Raises:
            OrderCodeGenerationException: If every attempt collided
        """
        for attempt in range(1, self.max_attempts + 1):
            code = self.generate()
            if not await exists(code):
                return code
            logger.warning(f"{kind.capitalize()} code collision on attempt {attempt}/{self.max_attempts}: {code}")

        logger.error(f"Could not generate a unique {kind} code after {self.max_attempts} attempts")
        raise OrderCodeGenerationException(attempts=self.max_attempts, kind=kind)


__all__ = ["CodeGenerator"]
