"""Recognizer adapters."""

from .yaml_header import YamlHeaderRecognizer

__all__ = ["YamlHeaderRecognizer"]
