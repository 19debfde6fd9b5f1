"""
Extractor Factory - Registry and factory for result extractors.

Result sources register themselves under a name ("mapping", "standard",
"breeders") and are created from raw profile data through the registry.
"""

from typing import Any, Dict, List, Type
import logging

from .protocol import ResultExtractor

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """Registry for available result extractors."""

    _extractors: Dict[str, Type[ResultExtractor]] = {}

    @classmethod
    def register(cls, name: str, extractor_class: Type[ResultExtractor]) -> None:
        """
        Register an extractor implementation.

        Args:
            name: Source name (e.g., "standard", "breeders")
            extractor_class: Class implementing ResultExtractor
        """
        name = name.lower()
        if name in cls._extractors:
            logger.warning(
                f"Extractor '{name}' already registered. Overwriting with {extractor_class}"
            )

        cls._extractors[name] = extractor_class
        logger.debug(f"Registered extractor: {name} -> {extractor_class.__name__}")

    @classmethod
    def create(cls, name: str, data: Any, **kwargs) -> ResultExtractor:
        """
        Create an extractor for raw profile data.

        Args:
            name: Registered source name
            data: Raw results handed to the extractor
            **kwargs: Extra constructor arguments

        Returns:
            Extractor instance

        Raises:
            ValueError: If name is not registered
        """
        source = name.lower()

        if source not in cls._extractors:
            available = ", ".join(cls._extractors.keys())
            raise ValueError(
                f"Unknown extractor: {source}. "
                f"Available extractors: {available}"
            )

        return cls._extractors[source](data, **kwargs)

    @classmethod
    def list_extractors(cls) -> List[str]:
        return list(cls._extractors.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower() in cls._extractors

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an extractor (mainly for testing)."""
        if name in cls._extractors:
            del cls._extractors[name]
            logger.debug(f"Unregistered extractor: {name}")


def create_extractor(name: str, data: Any, **kwargs) -> ResultExtractor:
    """Convenience wrapper around ExtractorRegistry.create."""
    return ExtractorRegistry.create(name, data, **kwargs)


def register_extractor(name: str):
    """
    Decorator for registering extractor classes.

    Example:
        @register_extractor("standard")
        class StandardProfileExtractor:
            ...
    """

    def decorator(cls):
        ExtractorRegistry.register(name, cls)
        return cls

    return decorator
