# pathkernel/utils/base_model.py
from typing import Any, Tuple
from pydantic import BaseModel


class ImmutableModel(BaseModel):
    """
    Base class for the kernel's value types.

    Instances are frozen after creation, so a transform or vector handed
    to a caller can never be changed behind its back. Operations build new
    instances instead.
    """
    model_config = {
        "frozen": True,
    }

    def as_tuple(self) -> Tuple[Any, ...]:
        """Field values in declaration order."""
        return tuple(getattr(self, name) for name in type(self).model_fields)
