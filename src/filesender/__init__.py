"""filesender - recognize, validate, sign and deliver document batches."""

__version__ = "0.1.0"
