"""appcore documents module.

Exports ``load_document`` and ``merge_parameters``.
"""
from __future__ import annotations

from appcore.documents.loader import load_document, merge_parameters

__all__ = ["load_document", "merge_parameters"]
