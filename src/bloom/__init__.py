"""
Bloom Module - Observations, Summaries & Bulletins.
"""

from src.bloom.summary import build_bloom_summary
from src.bloom.bulletin import generate_bulletin
from src.bloom.repository import BloomRepository, get_repository
from src.bloom.service import BloomService

__all__ = [
    "build_bloom_summary",
    "generate_bulletin",
    "BloomRepository",
    "get_repository",
    "BloomService",
]
