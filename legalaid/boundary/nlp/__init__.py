"""External language provider clients."""

from legalaid.boundary.nlp.ghana_nlp_client import GhanaNLPClient

__all__ = ["GhanaNLPClient"]
