from .client import ContentTransformerClient, TransformError

__all__ = ["ContentTransformerClient", "TransformError"]
