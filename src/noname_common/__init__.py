"""noname-common — data-utility primitives and a rule-based value validator."""

from __future__ import annotations

from noname_common.domain.collection import Collection
from noname_common.services.validator import Validator

__version__ = "0.4.0"

__all__ = ["Collection", "Validator", "__version__"]
