"""Encoder and decoder between JSON values and node graphs."""

from .graph_encoder import GraphEncoder
from .graph_decoder import GraphDecoder

__all__ = ["GraphEncoder", "GraphDecoder"]
