"""Extraction gateway for the external document-understanding API."""

from src.infrastructure.extraction.openai_gateway import OpenAIExtractionGateway

__all__ = ["OpenAIExtractionGateway"]
