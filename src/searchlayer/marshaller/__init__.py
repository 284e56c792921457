"""Document marshalling between the search abstraction and engine records."""

from searchlayer.marshaller.marshaller import Marshaller

__all__ = ["Marshaller"]
