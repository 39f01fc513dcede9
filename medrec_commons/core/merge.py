import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel


logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    copied: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class PropertyMergeError(RuntimeError):
    def __init__(self, result: MergeResult):
        super().__init__(f"Failed to copy fields: {', '.join(sorted(result.failed))}")
        self.result = result


def declared_fields(obj: Any) -> List[str]:
    if isinstance(obj, BaseModel):
        return list(type(obj).model_fields)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [f.name for f in dataclasses.fields(obj)]
    raise TypeError(f"{type(obj).__name__} is neither a pydantic model nor a dataclass instance")


def copy_non_null_properties(src: Any, target: Any, *, raise_on_error: bool = False) -> MergeResult:
    """Copy every field of ``src`` that is not ``None`` onto ``target``.

    ``src`` must be a pydantic model or a dataclass instance; anything else
    raises ``TypeError`` before any field is touched.

    Fields are attempted independently; one that cannot be assigned is
    recorded in the returned result and the rest are still copied. Pass
    ``raise_on_error=True`` to get a :class:`PropertyMergeError` when any
    field failed.
    """
    result = MergeResult()
    for name in declared_fields(src):
        value = getattr(src, name, None)
        if value is None:
            continue
        try:
            if not hasattr(target, name):
                raise AttributeError(f"{type(target).__name__} has no field '{name}'")
            setattr(target, name, value)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Failed to copy field '{name}' onto {type(target).__name__}: {e}")
            result.failed[name] = str(e)
        else:
            result.copied.append(name)

    if raise_on_error and result.failed:
        raise PropertyMergeError(result)
    return result
