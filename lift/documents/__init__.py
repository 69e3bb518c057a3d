"""Document reading, front matter stripping, classification and ordering."""

from .frontmatter import strip_front_matter
from .processor import (
    Document,
    DocumentKind,
    DocumentProcessor,
    OrderedDocuments,
    classify,
    index_priority,
    order_documents,
)

__all__ = [
    "Document",
    "DocumentKind",
    "DocumentProcessor",
    "OrderedDocuments",
    "classify",
    "index_priority",
    "order_documents",
    "strip_front_matter",
]
