"""Elasticsearch response models, fleet request builders and policy coordination."""

__version__ = "0.1.0"