"""Base Pydantic model for paramguard.

Every schema model in the package inherits from this class so that rule
sets share one configuration:

- Strict field validation (no extra fields allowed)
- Immutable instances, safe to share between threads and requests

Example:
    >>> from paramguard.models import ParamguardBaseModel
    >>>
    >>> class MyModel(ParamguardBaseModel):
    ...     name: str
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test'}
"""

from pydantic import BaseModel, ConfigDict


class ParamguardBaseModel(BaseModel):
    """Base model for all paramguard Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable once built
    - populate_by_name=True: Accepts both field names and their aliases
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
