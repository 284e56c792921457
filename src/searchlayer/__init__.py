"""searchlayer — Search abstraction over external search engines.

Documents, typed index schemas, filter conditions and pagination are
described once and translated to the query and document API of a backend
(currently Meilisearch).
"""

from searchlayer.engine import Engine
from searchlayer.exceptions import DocumentNotFoundError

__version__ = "0.1.0"

__all__ = ["DocumentNotFoundError", "Engine", "__version__"]
