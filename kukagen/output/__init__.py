"""Chunking and file emission."""

from kukagen.output.chunking import Chunk, chunk_trajectory
from kukagen.output.emitter import ChunkEmitter

__all__ = ["Chunk", "chunk_trajectory", "ChunkEmitter"]
