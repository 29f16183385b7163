"""Product form serialization for /cart/add.js."""
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from .errors import CartFormError

FormInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _entries(form: FormInput) -> Iterable[Tuple[str, Any]]:
    if isinstance(form, Mapping):
        return form.items()
    return form


def serialize_form(form: FormInput) -> Dict[str, Any]:
    """
    Flatten product form fields into a JSON-ready dict.

    Accepts a mapping or (name, value) pairs as produced by a multi-valued
    form. A repeated field keeps its last value; the "id" check uses the
    first one.

    Raises:
        CartFormError: If the form has no non-empty "id" field
    """
    entries = list(_entries(form))

    first_id = next((value for name, value in entries if name == "id"), None)
    if first_id is None or first_id == "":
        raise CartFormError()

    return {name: value for name, value in entries}


__all__ = ["serialize_form"]
